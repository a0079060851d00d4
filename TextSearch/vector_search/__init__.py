"""
Vector search module ranking documents by cosine similarity of term-frequency vectors.
"""
