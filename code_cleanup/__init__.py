"""
Code Cleanup MCP Server

Cleans up source files through the Gemini API and keeps timestamped backups
in a local stash.
"""

__version__ = "1.0.0"
