"""threadllm — flatten a Reddit thread into LLM-friendly text."""

__version__ = "0.1.0"
