"""
Preprocessing module turning document sources into token streams.
Includes the document source adapters, the tokenizer and the Document type.
"""
