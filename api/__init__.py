"""
HTTP API for the Program DOCX Compiler.
"""
