"""
External system adapters: document download, embeddings, LLM and vector index.
"""
