"""
Services Package - Tokenizer, settings, clipboard, output sinks va fzf selection.
"""
