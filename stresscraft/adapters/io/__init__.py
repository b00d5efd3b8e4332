"""Terminal I/O adapters: Rich logging setup."""
