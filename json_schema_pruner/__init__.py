"""Core logic for JSON Schema Pruner.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse JSON document and schema text
- build a typed schema tree from a schema descriptor
- project a document onto the schema's declared shape
- serialise the pruned result
"""
