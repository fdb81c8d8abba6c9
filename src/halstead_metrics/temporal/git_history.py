"""Analyze every git revision of one file via subprocess."""

import re
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from ..api import analyze
from ..config import AnalysisConfig
from ..exceptions import HalsteadError, SourceUnavailableError
from ..logging_config import get_logger
from ..scanning.lexer import tokenize_source
from ..scanning.ppi_dump import read_ppi_dump
from .models import HistoryPoint, Revision

logger = get_logger(__name__)

_GIT_TIMEOUT = 30


class GitHistoryRunner:
    """Feed each committed version of a file through the analysis core."""

    # Matches: 40-char hex hash | unix timestamp | subject
    # Subject can contain | characters, so we use maxsplit=2 during parsing
    _HEADER_RE = re.compile(r"^[0-9a-f]{40}\|\d+\|.*$")

    def __init__(self, repo_path: Union[str, Path], max_commits: int = 100):
        self.repo_path = str(Path(repo_path).resolve())
        self.max_commits = max_commits

    def _git(self, *args: str) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                ["git", "-C", self.repo_path, *args],
                capture_output=True,
                timeout=_GIT_TIMEOUT,
            )
        except FileNotFoundError as e:
            raise SourceUnavailableError(self.repo_path, "git executable not found") from e
        except subprocess.TimeoutExpired as e:
            raise SourceUnavailableError(self.repo_path, f"git {args[0]} timed out") from e

    def toplevel(self) -> Path:
        """Root of the working tree.

        Raises:
            SourceUnavailableError: If repo_path is not inside a git repository
        """
        result = self._git("rev-parse", "--show-toplevel")
        if result.returncode != 0:
            raise SourceUnavailableError(self.repo_path, "not inside a git repository")
        return Path(result.stdout.decode().strip())

    def relative_path(self, path: Union[str, Path]) -> str:
        """Path of ``path`` relative to the repository root, in git's form."""
        top = self.toplevel().resolve()
        try:
            return Path(path).resolve().relative_to(top).as_posix()
        except ValueError:
            raise SourceUnavailableError(path, f"outside repository {top}")

    def revisions(self, path: Union[str, Path]) -> List[Revision]:
        """Commits touching ``path``, newest first."""
        rel = self.relative_path(path)
        result = self._git("log", "--format=%H|%at|%s", f"-n{self.max_commits}", "--", rel)
        if result.returncode != 0:
            raise SourceUnavailableError(path, result.stderr.decode(errors="replace").strip())
        return self._parse_log(result.stdout.decode(errors="replace"))

    def _parse_log(self, raw: str) -> List[Revision]:
        revisions = []
        for line in raw.splitlines():
            line = line.strip()
            if not self._HEADER_RE.match(line):
                continue
            sha, ts, subject = line.split("|", 2)
            revisions.append(Revision(sha=sha, timestamp=int(ts), subject=subject))
        return revisions

    def read_revision(self, revision: Revision, rel_path: str, encoding: str = "utf-8") -> str:
        """File content at a revision."""
        result = self._git("show", f"{revision.sha}:{rel_path}")
        if result.returncode != 0:
            raise SourceUnavailableError(
                f"{rel_path}@{revision.short_sha}",
                result.stderr.decode(errors="replace").strip(),
            )
        try:
            return result.stdout.decode(encoding)
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(
                f"{rel_path}@{revision.short_sha}", f"cannot decode as {encoding}: {e.reason}"
            ) from e

    def run(
        self, path: Union[str, Path], config: Optional[AnalysisConfig] = None
    ) -> List[HistoryPoint]:
        """Analyze ``path`` at each revision, newest first.

        A revision that cannot be read or analyzed records its error; the
        remaining revisions are still processed.
        """
        config = config or AnalysisConfig()
        rel = self.relative_path(path)
        revisions = self.revisions(path)
        if not revisions:
            logger.warning(f"No commits touch {rel}")

        points = []
        for revision in revisions:
            label = f"{rel}@{revision.short_sha}"
            try:
                code = self.read_revision(revision, rel, encoding=config.encoding)
                if config.ppi_dump:
                    tokens = read_ppi_dump(code)
                else:
                    tokens = tokenize_source(
                        code, filename=Path(rel).name, lexer_name=config.lexer
                    )
                points.append(
                    HistoryPoint(revision, run=analyze(tokens, source=label, policy=config.policy()))
                )
            except HalsteadError as e:
                logger.warning(f"Skipping {label}: {e}")
                points.append(HistoryPoint(revision, error=e))
        return points
