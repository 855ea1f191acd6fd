"""
dtheader.config.defaults - Default configuration values.
"""

DEFAULT_CONFIG = {
    "header": {
        # Mode used by "dtheader parse"
        "strict": False,
    },
    "validate": {
        # Mode used by "dtheader validate"
        "strict": True,
    },
    "files": {
        "patterns": ["index.d.ts"],
        "skip": ["node_modules"],
    },
    "output": {
        "format": "text",
    },
}

OUTPUT_FORMATS = ("text", "json")
