"""Core building blocks: content store access, uploads and browsing."""
