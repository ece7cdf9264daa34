"""
Pytest configuration and fixtures for tersify tests.
"""

import tempfile
from pathlib import Path

import pytest

from tersify.dialect import Dialect


@pytest.fixture
def dialect() -> Dialect:
    """Default Dart specification dialect."""
    return Dialect.default()


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_spec_lines() -> list[str]:
    """A small specification exercising every pass."""
    return r"""\documentclass{article}
% Preamble comment.
\usepackage{dart}
\begin{document}
\section{Variables}

\LMHash{}%
A variable is a storage location
in memory.   % trailing comment
\commentary{Variables are common.}

\begin{dartCode}
var x = 1;
\end{dartCode}

\rationale{
  This is why.
}

\LMHash{}%
A \Index{final variable} is
bound once.
\BlindDefineSymbol{x, y}

\begin{itemize}
\item The first
  item.
\item The second item.
  \begin{itemize}
  \item Nested
    item.
  \end{itemize}
\end{itemize}

\noindent
Continued text
after the list.



\end{document}
Everything here is ignored.
""".splitlines()
