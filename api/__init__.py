"""HTTP-Schicht."""
