"""Path derivation pipeline: flatten, filter, expand, split."""
