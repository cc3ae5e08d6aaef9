"""Test package for embedvideo."""
