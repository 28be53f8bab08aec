"""
Constants and default values for the Code Cleanup MCP Server
"""

# ============================================================================
# SERVER CONSTANTS
# ============================================================================

SERVER_NAME = "code-cleanup"
SERVER_VERSION = "1.0.0"

# ============================================================================
# STASH CONSTANTS
# ============================================================================

STASH_DIR_NAME = ".stash"
BACKUP_SUFFIX = ".bak"

# ============================================================================
# GENERATION CONSTANTS
# ============================================================================

DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_OUTPUT_TOKENS = 8192

# Retry policy for server-side generation failures
GENERATION_MAX_ATTEMPTS = 3
GENERATION_BACKOFF_MIN_SECONDS = 2
GENERATION_BACKOFF_MAX_SECONDS = 10

# Prompt section headers, sent in this order around the instruction and code
PROMPT_TASK = "Clean up the provided code file."
PROMPT_INSTRUCTION_HEADER = "# SYSTEM INSTRUCTION:"
PROMPT_FILENAME_HEADER = "# FILE NAME:"
PROMPT_CODE_HEADER = "# CODE:"

DEFAULT_SYSTEM_INSTRUCTION = """
Clean up the provided code like a professional software engineer, focusing on:

* Removing unused imports, variables, and redundant one line comments (retain only meaningful comment and documentation).
* Ensuring consistent naming and formatting according to language best practices.
* Simplifying minor inefficiencies (e.g., redundant calculations) *without* altering the core logic.
* Removing unnecessary whitespace while preserving single-line breaks between logical blocks of code.

Crucially, *do not* change the code's original logic, variable names (unless obviously incorrect style), or overall functionality.  Do not add any new comments except to clarify existing deprecated code. Do not rewrite or restructure major sections of code.

Output *only* the cleaned, raw code, with proper indentation and formatting.  Do not include any introductory phrases, explanations, annotations, or markdown formatting (backticks or otherwise). The output should be the code itself, ready to be copied and pasted.

Example:

**Not like this:**

```javascript
console.log("hello");
```

**Like this:**

console.log("hello")

---
Provide back raw code.
"""
