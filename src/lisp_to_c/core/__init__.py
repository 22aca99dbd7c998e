"""
Core Compilation Stages.

Contains the AST traverser and transformer, the pipeline composition and the
result-oriented `Engine`.
"""
