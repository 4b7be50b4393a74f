from __future__ import annotations

import shutil
import string
import subprocess

import pytest

from dotenvk.core.export import export_bash
from dotenvk.core.shell import ESCAPE_MAP, TRIGGER_CHARS, needs_quoting, shell_escape


def test_escape_subset_is_within_trigger_set():
    assert set(ESCAPE_MAP) <= TRIGGER_CHARS


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain123", "plain123"),
        ("", ""),
        ("user@host:8080/path-1_2%3D+x,y=z~", "user@host:8080/path-1_2%3D+x,y=z~"),
        ("$HOME", '"\\$HOME"'),
        ("with space", '"with space"'),
        ('with"quote', '"with\\"quote"'),
        ("with'apostrophe", '"with\'apostrophe"'),
        ("`whoami`", '"\\`whoami\\`"'),
        ("C:\\dir", '"C:\\\\dir"'),
        ("alert!", '"alert\\!"'),
        ("line1\nline2", '"line1\\nline2"'),
        ("a\rb", '"a\\rb"'),
        ("tab\there", '"tab\\there"'),
        ("a;b|c&d", '"a;b|c&d"'),
        ("*?[]{}()<>#", '"*?[]{}()<>#"'),
    ],
)
def test_shell_escape(value, expected):
    assert shell_escape(value) == expected


@pytest.mark.parametrize("ch", sorted(TRIGGER_CHARS))
def test_every_trigger_char_forces_quotes(ch):
    assert needs_quoting(ch)
    out = shell_escape(f"a{ch}b")
    assert out.startswith('"') and out.endswith('"')


@pytest.mark.parametrize(
    "ch", [c for c in string.printable if c not in TRIGGER_CHARS and c not in "\x0b\x0c"]
)
def test_safe_chars_are_left_alone(ch):
    assert shell_escape(ch) == ch


NASTY_VALUES = {
    "INJECTION1": "$(whoami)",
    "INJECTION2": "`whoami`",
    "INJECTION3": "; rm -rf /",
    "INJECTION4": "| cat /etc/passwd",
    "INJECTION5": "&& ls -la",
    "QUOTES": 'She said "hello"',
    "SINGLE": "it's",
    "BACKSLASH": "C:\\Users\\test",
    "GLOB": "*?[a-z]{1,2}",
    "REDIRECT": "a>b<c",
    "HASH": "value # not a comment",
    "URL": "https://api.example.com/v1?key=value&token=abc123",
}

requires_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not available")


@requires_bash
def test_bash_export_is_syntactically_valid():
    script = export_bash(
        {**NASTY_VALUES, "NEWLINE": "line1\nline2", "BANG": "alert!", "TAB": "a\tb"}
    )
    proc = subprocess.run(["bash", "-n"], input=script, capture_output=True, text=True)
    assert proc.returncode == 0, proc.stderr


@requires_bash
@pytest.mark.parametrize("key", sorted(NASTY_VALUES))
def test_bash_export_preserves_value(key):
    script = export_bash({key: NASTY_VALUES[key]}) + f'printf "%s" "${key}"\n'
    proc = subprocess.run(["bash", "-c", script], capture_output=True, text=True)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == NASTY_VALUES[key]
