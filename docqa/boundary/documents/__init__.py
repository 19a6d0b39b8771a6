"""Document download and text extraction."""
