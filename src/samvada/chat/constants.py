# src/samvada/chat/constants.py

"""Document grammar constants.

The frontmatter template is the single source for the keys a chat document
must declare. `{key}` is a required placeholder; `{key?}` may be left blank.
"""

FRONTMATTER_DELIMITER = "---"

FRONTMATTER_TEMPLATE = """---
title: {title}
system: {system}
model: {model}
api_endpoint: {api_endpoint}
created_at: {created_at}
updated_at: {updated_at}
tags: {tags}
summary: {summary?}
---"""

USER_PREFIX = "user:"
ASSISTANT_PREFIX = "assistant:"

# User turns
COMMENT_PREFIX = "<c>"
REFERENCE_OPEN = "[["
REFERENCE_CLOSE = "]]"

# Assistant turns
METADATA_OPEN = "<!--"
METADATA_CLOSE = "-->"
