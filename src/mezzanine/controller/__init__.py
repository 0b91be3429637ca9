"""
Controller Package
Runs the interactive pipeline: capture, prompt, generation and cleanup.
"""
