"""Process environment adapter package."""
