"""Group channel model for a remote messaging service client."""
