"""Platform adapters: environment access and logging."""
