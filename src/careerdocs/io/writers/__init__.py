"""Document writers: plain text and PDF."""
