# common/env_file.py
# -*- coding: utf-8 -*-
"""
Text transformations for KEY=VALUE environment files.

The functions here are pure: they take file content and return new
content, leaving reading and writing to the caller.
"""

import re
from typing import Dict, List, Optional, Sequence, Tuple

Substitution = Tuple[str, str]


def substitute_lines(content: str, substitutions: Sequence[Substitution]) -> str:
    """
    Apply literal substitutions line by line, in order.

    Each substitution replaces only the first occurrence on a line, and
    later substitutions see the output of earlier ones, which is how a
    chain of `sed -i 's/old/new/'` calls behaves.
    """
    lines = content.splitlines(keepends=True)
    for old, new in substitutions:
        lines = [line.replace(old, new, 1) for line in lines]
    return "".join(lines)


def _line_ending(content: str) -> str:
    return "\r\n" if "\r\n" in content else "\n"


def get_env_value(content: str, key: str) -> Optional[str]:
    """Return the value of the first uncommented `key=` line, or None."""
    pattern = re.compile(rf"^{re.escape(key)}=([^\r\n]*)", re.MULTILINE)
    match = pattern.search(content)
    return match.group(1) if match else None


def upsert_env_block(
    content: str,
    values: Dict[str, str],
    header: Optional[str] = None,
) -> str:
    """
    Set each key in `values`.

    Keys that already have an uncommented line are rewritten in place. The
    remaining keys are appended after a blank line and the optional header
    comment, in the order given, using the file's own line ending.
    """
    missing: List[str] = []
    for key, value in values.items():
        pattern = re.compile(rf"^{re.escape(key)}=[^\r\n]*", re.MULTILINE)
        if pattern.search(content):
            content = pattern.sub(lambda _m, k=key, v=value: f"{k}={v}", content, count=1)
        else:
            missing.append(key)

    if not missing:
        return content

    newline = _line_ending(content)
    if content and not content.endswith("\n"):
        content += newline
    block = ["", header] if header else [""]
    block.extend(f"{key}={values[key]}" for key in missing)
    return content + newline.join(block) + newline


def quote_env_value(value: str) -> str:
    """
    Double-quote a value that contains whitespace or double quotes.

    Backslashes and double quotes inside the value are escaped. A value
    that is already a single double-quoted string is returned as is.
    """
    already_quoted = (
        len(value) >= 2
        and value.startswith('"')
        and value.endswith('"')
        and '"' not in value[1:-1]
    )
    if already_quoted:
        return value
    if not re.search(r'[\s"]', value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
