"""
Core RAG pipeline.

Chunking, namespacing, prompt construction and the indexing/answering
orchestrators. Import submodules directly.
"""
