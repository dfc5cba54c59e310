"""Check orchestration: fingerprint, consult the cache, call the model, normalize.

``VibeChecker.check`` is the single-document entry point and never raises;
``VibeChecker.check_all`` runs it sequentially over a batch of files.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from vibechecks.checker.cache import FingerprintCache, is_cache_hit
from vibechecks.checker.documents import open_document, relative_key
from vibechecks.checker.git import GitRunner, git_diff_for_file, read_changed_files, run_git
from vibechecks.checker.normalizer import parse_response
from vibechecks.checker.oracle import Oracle
from vibechecks.config import VibeChecksConfig
from vibechecks.constants.instructions import MISSING_INSTRUCTIONS_MESSAGE
from vibechecks.constants.oracle import MISSING_MODEL_MESSAGE
from vibechecks.exceptions import ConfigError, VibeChecksError
from vibechecks.instructions import resolve_instructions
from vibechecks.io import text_sha256
from vibechecks.model import BatchSummary, CheckResult, Document
from vibechecks.reporting.diagnostics import DiagnosticCollection
from vibechecks.reporting.stdout import StdoutReporter

logger = logging.getLogger(__name__)


class VibeChecker:
    """Runs instruction-driven checks for one workspace."""

    def __init__(
        self,
        *,
        config: VibeChecksConfig,
        root: Path | None,
        oracle: Oracle,
        cache: FingerprintCache | None = None,
        reporter: StdoutReporter | None = None,
        emit: Callable[[str], None] = print,
        git_runner: GitRunner = run_git,
    ) -> None:
        self.config = config
        self.root = root.resolve() if root is not None else None
        self.oracle = oracle
        self.cache = cache if cache is not None else FingerprintCache(self._default_cache_path())
        self.reporter = reporter or StdoutReporter(color=False)
        self.diagnostics = DiagnosticCollection()
        self.cache_hits = 0
        self.cache_misses = 0
        self._emit = emit
        self._git_runner = git_runner
        self._prompted_for_instructions = False

    def _default_cache_path(self) -> Path | None:
        if self.root is None:
            return None
        return self.config.cache_file(self.root)

    def relative_path(self, path: Path) -> str:
        return relative_key(path, self.root)

    def instructions_for(self, language_id: str | None) -> str | None:
        """Resolve instructions for a language; ``None`` means nothing is configured."""
        folder = self.config.instructions_path(self.root)
        language = language_id if self.config.language_sections else None
        instructions = resolve_instructions(folder, language)
        if instructions is None and not self._prompted_for_instructions:
            self._prompted_for_instructions = True
            logger.warning("No instruction documents found in %s", folder)
            self._emit(f"Vibe Checks: {MISSING_INSTRUCTIONS_MESSAGE}")
        return instructions

    async def check_document(self, document: Document) -> CheckResult | None:
        """Resolve instructions and check ``document``; ``None`` when no instructions exist."""
        try:
            instructions = self.instructions_for(document.language_id)
        except VibeChecksError as exc:
            self._emit(f"Error: {exc}")
            return CheckResult.failure(str(exc))
        if instructions is None:
            return None
        return await self.check(document, instructions)

    async def check(self, document: Document, instructions: str, *, notify: bool = True) -> CheckResult:
        """Check one document against ``instructions``; failures become failing verdicts."""
        rel_path = self.relative_path(document.path)
        self._emit(self.reporter.render_start(rel_path))
        try:
            result = await self._check(document, instructions, rel_path)
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            logger.debug("Check of %s failed", rel_path, exc_info=True)
            self._emit(f"Error: {message}")
            return CheckResult.failure(message)

        self._emit(self.reporter.render_check(result, rel_path))
        if notify:
            self._emit(self.reporter.render_notification(result, rel_path))
        if self.config.in_editor_feedback:
            self.diagnostics.show(result, document.path)
        return result

    async def _check(self, document: Document, instructions: str, rel_path: str) -> CheckResult:
        if not self.config.model_id:
            raise ConfigError(MISSING_MODEL_MESSAGE)
        if self.root is None:
            raise ConfigError("No workspace folder opened")

        source = await self._source_for(document)
        instructions_hash = text_sha256(instructions)
        file_hash = text_sha256(source)

        cached = self.cache.get(rel_path)
        if is_cache_hit(cached, instructions_hash=instructions_hash, file_hash=file_hash):
            assert cached is not None
            self.cache_hits += 1
            logger.debug("Cache hit for %s", rel_path)
            return parse_response(cached["response"])

        self.cache_misses += 1
        logger.debug("Cache miss for %s", rel_path)
        response = await self.oracle.invoke(
            instructions,
            source,
            self.config.model_id,
            rel_path,
            document.language_id,
        )
        result = parse_response(response)
        self.cache.set(
            rel_path,
            {"instructionsHash": instructions_hash, "fileHash": file_hash, "response": response},
        )
        return result

    async def _source_for(self, document: Document) -> str:
        if not self.config.changed_lines_only or self.root is None:
            return document.text
        diff = await git_diff_for_file(self.root, document.path, runner=self._git_runner)
        # A clean file has no diff; review the whole content instead.
        return diff if diff.strip() else document.text

    async def check_all(self, files: Sequence[Path], *, instructions: str | None = None) -> BatchSummary | None:
        """Check ``files`` one after another and aggregate the outcome.

        Instructions are resolved once per language unless given explicitly.
        Returns ``None`` when no instructions are configured.
        """
        if not files:
            self._emit("No changed files to check.")
            return BatchSummary()

        resolved: dict[str, str | None] = {}
        results: dict[str, CheckResult] = {}
        failed: list[str] = []
        skipped: list[str] = []
        total_errors = 0
        total_warnings = 0

        for path in files:
            rel_path = self.relative_path(path)
            try:
                document = open_document(path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Could not open %s: %s", rel_path, exc)
                self._emit(f"Could not open file: {rel_path}")
                skipped.append(rel_path)
                continue

            try:
                if instructions is not None:
                    document_instructions = instructions
                else:
                    if document.language_id not in resolved:
                        resolved[document.language_id] = self.instructions_for(document.language_id)
                    document_instructions = resolved[document.language_id]
            except VibeChecksError as exc:
                self._emit(f"Error: {exc}")
                result = CheckResult.failure(str(exc))
            else:
                if document_instructions is None:
                    return None
                result = await self.check(document, document_instructions, notify=False)

            results[rel_path] = result
            if not result.passed:
                failed.append(rel_path)
            total_errors += len(result.errors)
            total_warnings += len(result.warnings)

        summary = BatchSummary(
            checked_files=len(results),
            failed_files=tuple(failed),
            skipped_files=tuple(skipped),
            total_errors=total_errors,
            total_warnings=total_warnings,
            results=results,
        )
        self._emit(self.reporter.render_summary(summary))
        logger.info(
            "Checked %d file(s): %d failed, %d error(s), %d warning(s), %d cache hit(s)",
            summary.checked_files,
            len(summary.failed_files),
            total_errors,
            total_warnings,
            self.cache_hits,
        )
        return summary

    async def check_changes(self) -> BatchSummary | None:
        """Check every staged or modified tracked file reported by git."""
        if self.root is None:
            raise ConfigError("No workspace folder opened")
        self._emit("Running Vibe Checks on all changed files in the repository...")
        candidates = await read_changed_files(self.root, runner=self._git_runner)
        return await self.check_all([self.root / entry.filename for entry in candidates])

    def clear_cache(self) -> None:
        """Evict every cache entry and delete the backing artifact."""
        self.cache.clear()
        self.cache.delete_file()
        self.diagnostics.clear_all()
        self._emit("Vibe Checks cache cleared.")
