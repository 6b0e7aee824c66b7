"""Pipeline orchestration for build/publish/rebuild flows."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from .catalog import CatalogPublisher, Copier, PublishCollisionError
from .config import ConfigError, StarterdocConfig, load_config
from .constants import CONTRACTS_DIRNAME, DIST_DIRNAME, TESTS_DIRNAME
from .extractors import Extractor, extract_entities
from .logging import get_logger, log_failure
from .metadata import SynthesisDefaults, SynthesisError, synthesize_metadata
from .models import Metadata, SourceEntity
from .rendering import DocumentRenderer, TemplateMissingError
from .validators import MetadataValidator

MISSING_STRUCTURE = "missing structure"
AMBIGUOUS_CONTRACT = "ambiguous or missing contract file"
SYNTHESIS_FAILED = "metadata synthesis failed"
METADATA_INVALID = "metadata invalid"
TEMPLATE_MISSING = "template missing"
MISSING_DIST = "missing dist"
PUBLISH_COLLISION = "publish collision"
CANCELLED = "cancelled"
UNSAFE_OUTPUT = "unsafe output path"
UNEXPECTED_ERROR = "unexpected error"


class Stage(str, Enum):
    """Pipeline states; ``aborted`` is reachable from every other state."""

    VERIFYING = "verifying"
    DETECTING = "detecting"
    EXTRACTING_METADATA = "extracting_metadata"
    VALIDATING = "validating"
    RENDERING = "rendering"
    PACKAGING = "packaging"
    PUBLISHING = "publishing"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class PipelineFailure:
    """Why a run stopped: the stage, a short reason and every collected cause."""

    stage: Stage
    reason: str
    messages: tuple[str, ...] = ()

    def describe(self) -> str:
        lines = [f"{self.stage.value}: {self.reason}"]
        lines.extend(f"  - {message}" for message in self.messages)
        return "\n".join(lines)


class PipelineAborted(RuntimeError):
    """Raised inside a run to stop it; converted to a :class:`PipelineFailure` at the boundary."""

    def __init__(self, stage: Stage, reason: str, messages: Iterable[str] = ()) -> None:
        super().__init__(f"{stage.value}: {reason}")
        self.stage = stage
        self.reason = reason
        self.messages = [message for message in messages if message]

    def to_failure(self) -> PipelineFailure:
        return PipelineFailure(stage=self.stage, reason=self.reason, messages=tuple(self.messages))


@dataclass
class BuildOptions:
    """Caller-supplied overrides for a build, publish or rebuild run."""

    output_path: Optional[Path] = None
    template_path: Optional[Path] = None
    category: Optional[str] = None
    chapter: Optional[str] = None
    starter_name: Optional[str] = None
    force: bool = False
    contract: Optional[str] = None
    has_ui: Optional[bool] = None
    version: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BuildOptions":
        """Build options from e.g. parsed CLI arguments, ignoring unknown keys."""
        known = {item.name for item in fields(cls)}
        values = {key: value for key, value in data.items() if key in known and value is not None}
        for key in ("output_path", "template_path"):
            if key in values:
                values[key] = Path(values[key])
        if "force" in values:
            values["force"] = bool(values["force"])
        return cls(**values)

    def synthesis_defaults(self) -> SynthesisDefaults:
        return SynthesisDefaults(
            starter_name=self.starter_name,
            category=self.category,
            chapter=self.chapter,
            has_ui=self.has_ui,
            version=self.version,
            author=self.author,
        )


@dataclass
class BuildResult:
    """Outcome of a build; exactly one of the artifact paths or ``failure`` is meaningful."""

    draft_dir: Path
    stage: Stage = Stage.VERIFYING
    contract_path: Optional[Path] = None
    metadata: Optional[Metadata] = None
    metadata_path: Optional[Path] = None
    document_path: Optional[Path] = None
    dist_dir: Optional[Path] = None
    failure: Optional[PipelineFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class PublishResult:
    draft_dir: Path
    stage: Stage = Stage.PUBLISHING
    name: Optional[str] = None
    entry_dir: Optional[Path] = None
    docs_path: Optional[Path] = None
    failure: Optional[PipelineFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class RebuildSummary:
    """Per-entry outcome of a catalog rebuild."""

    root: Path
    dry_run: bool = False
    rebuilt: List[str] = field(default_factory=list)
    skipped: Dict[str, List[str]] = field(default_factory=dict)
    failure: Optional[PipelineFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class Orchestrator:
    """Coordinates the starter build, publish and rebuild pipelines."""

    def __init__(
        self,
        config: StarterdocConfig | None = None,
        *,
        renderer: DocumentRenderer | None = None,
        publisher: CatalogPublisher | None = None,
        extractors: Optional[Iterable[Extractor]] = None,
        copier: Copier | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ) -> None:
        self.config = config or self._load_config(Path.cwd())
        self.renderer = renderer
        self.publisher = publisher or CatalogPublisher(
            self.config.catalog_dir,
            docs_dir=self.config.docs_dir,
            copier=copier,
        )
        self._extractors = list(extractors) if extractors is not None else None
        self._should_cancel = should_cancel
        self.validator = MetadataValidator(self.config.taxonomy, self.config.validation.profile)
        self.logger = get_logger("orchestrator")

    # ------------------------------------------------------------------
    # Build

    def run_build(self, draft_dir: Path | str, options: BuildOptions | None = None) -> BuildResult:
        """Turn a draft into ``dist/`` with metadata and rendered documentation."""
        options = options or BuildOptions()
        draft = Path(draft_dir).expanduser().resolve()
        result = BuildResult(draft_dir=draft)
        self.logger.info("Building starter from %s", draft)
        try:
            self._build(draft, options, result)
        except PipelineAborted as exc:
            return self._abort_build(result, exc)
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.debug("Unexpected build error", exc_info=True)
            return self._abort_build(result, PipelineAborted(result.stage, UNEXPECTED_ERROR, [str(exc)]))
        result.stage = Stage.DONE
        self.logger.info("Starter '%s' built in %s", result.metadata.name if result.metadata else "?", result.dist_dir)
        return result

    def _build(self, draft: Path, options: BuildOptions, result: BuildResult) -> None:
        self._enter(result, Stage.VERIFYING)
        contract_files = self._verify_draft(draft)

        self._enter(result, Stage.DETECTING)
        contract_path = self._detect_contract(contract_files, options.contract)
        result.contract_path = contract_path
        self.logger.info("Contract found: %s", contract_path.name)

        self._enter(result, Stage.EXTRACTING_METADATA)
        source = contract_path.read_text(encoding="utf-8")
        entities = extract_entities(source, self._extractors)
        metadata = self._synthesize(source, contract_path, options, entities)
        result.metadata = metadata
        result.metadata_path = self._write_metadata(draft / self.config.metadata_file, metadata, result.stage)

        self._enter(result, Stage.VALIDATING)
        self._validate(metadata, result.stage)

        self._enter(result, Stage.RENDERING)
        document = self._render(metadata, entities, options, result.stage)
        result.document_path = self._write_text(draft / self.config.document_file, document, result.stage)

        self._enter(result, Stage.PACKAGING)
        dist = Path(options.output_path).expanduser().resolve() if options.output_path else draft / DIST_DIRNAME
        self._check_output(draft, dist)
        result.dist_dir = self._package(draft, dist, contract_path, result)

    def _verify_draft(self, draft: Path) -> List[Path]:
        contracts_dir = draft / CONTRACTS_DIRNAME
        tests_dir = draft / TESTS_DIRNAME
        problems: List[str] = []
        contract_files: List[Path] = []
        if not draft.is_dir():
            problems.append(f"Draft directory not found: {draft}")
        else:
            if not contracts_dir.is_dir():
                problems.append(f"Contracts directory not found: {contracts_dir}")
            else:
                contract_files = self._contract_files(contracts_dir)
                if not contract_files:
                    problems.append(f"No {self.config.contract_extension} files found in: {contracts_dir}")
            if not tests_dir.is_dir():
                problems.append(f"Test directory not found: {tests_dir}")
        if problems:
            raise PipelineAborted(Stage.VERIFYING, MISSING_STRUCTURE, problems)
        return contract_files

    def _detect_contract(self, candidates: Sequence[Path], selector: Optional[str]) -> Path:
        if selector:
            wanted = Path(selector).name
            for candidate in candidates:
                if wanted in (candidate.name, candidate.stem):
                    return candidate
            raise PipelineAborted(
                Stage.DETECTING,
                AMBIGUOUS_CONTRACT,
                [f"Contract '{selector}' not found among: {', '.join(path.name for path in candidates)}"],
            )
        if len(candidates) != 1:
            raise PipelineAborted(
                Stage.DETECTING,
                AMBIGUOUS_CONTRACT,
                [
                    f"Found {len(candidates)} contract files ({', '.join(path.name for path in candidates)}); "
                    "pass --contract to choose one"
                ],
            )
        return candidates[0]

    @staticmethod
    def _check_output(draft: Path, dist: Path) -> None:
        """Refuse a package directory whose wipe would delete draft sources."""
        protected = (draft, draft / CONTRACTS_DIRNAME, draft / TESTS_DIRNAME)
        for source in protected:
            if source.is_relative_to(dist) or (source != draft and dist.is_relative_to(source)):
                raise PipelineAborted(
                    Stage.PACKAGING,
                    UNSAFE_OUTPUT,
                    [f"Output directory {dist} would overwrite draft sources in {source}"],
                )

    def _package(self, draft: Path, dist: Path, contract_path: Path, result: BuildResult) -> Path:
        self._checkpoint(result.stage)
        if dist.exists():
            shutil.rmtree(dist)
        (dist / CONTRACTS_DIRNAME).mkdir(parents=True)
        (dist / TESTS_DIRNAME).mkdir(parents=True)

        self._copy_file(contract_path, dist / CONTRACTS_DIRNAME / contract_path.name, result.stage)
        for test_file in sorted((draft / TESTS_DIRNAME).iterdir()):
            if test_file.is_file():
                self._copy_file(test_file, dist / TESTS_DIRNAME / test_file.name, result.stage)
        for produced in (result.metadata_path, result.document_path):
            if produced is not None:
                self._copy_file(produced, dist / produced.name, result.stage)
        return dist

    # ------------------------------------------------------------------
    # Publish

    def run_publish(self, draft_dir: Path | str, options: BuildOptions | None = None) -> PublishResult:
        """Copy a built ``dist/`` into the catalog as ``<catalog>/<name>``."""
        options = options or BuildOptions()
        draft = Path(draft_dir).expanduser().resolve()
        result = PublishResult(draft_dir=draft)
        self.logger.info("Publishing starter from %s", draft)
        try:
            self._publish(draft, options, result)
        except PipelineAborted as exc:
            return self._abort_publish(result, exc)
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.debug("Unexpected publish error", exc_info=True)
            return self._abort_publish(result, PipelineAborted(Stage.PUBLISHING, UNEXPECTED_ERROR, [str(exc)]))
        result.stage = Stage.DONE
        self.logger.info("Starter '%s' published to %s", result.name, result.entry_dir)
        return result

    def _publish(self, draft: Path, options: BuildOptions, result: PublishResult) -> None:
        dist = Path(options.output_path).expanduser().resolve() if options.output_path else draft / DIST_DIRNAME
        if not dist.is_dir():
            raise PipelineAborted(
                Stage.PUBLISHING,
                MISSING_DIST,
                [f"Dist directory not found: {dist}", "Run 'starterdoc build' first"],
            )
        metadata = self._read_metadata(dist / self.config.metadata_file, Stage.PUBLISHING)

        name = options.starter_name or metadata.name
        errors = list(self.validator.validate(metadata).errors)
        if name != metadata.name:
            errors.append(f"name: metadata name '{metadata.name}' does not match catalog entry '{name}'")
        if errors:
            raise PipelineAborted(Stage.PUBLISHING, METADATA_INVALID, errors)
        result.name = name

        try:
            self.publisher.check_available(name, force=options.force)
        except PublishCollisionError as exc:
            raise PipelineAborted(Stage.PUBLISHING, PUBLISH_COLLISION, [str(exc)]) from exc

        self._checkpoint(Stage.PUBLISHING)
        result.entry_dir = self.publisher.publish(
            dist,
            name,
            force=options.force,
        )
        self._checkpoint(Stage.PUBLISHING)
        result.docs_path = self.publisher.mirror_document(
            result.entry_dir,
            name,
            document_file=self.config.document_file,
        )

    # ------------------------------------------------------------------
    # Single-file helpers

    def build_metadata(self, contract_path: Path | str, options: BuildOptions | None = None) -> BuildResult:
        """Write ``metadata.json`` for one contract file (next to it unless ``output_path`` is set)."""
        options = options or BuildOptions()
        contract = Path(contract_path).expanduser().resolve()
        result = BuildResult(draft_dir=contract.parent, stage=Stage.DETECTING, contract_path=contract)
        self.logger.info("Generating metadata for %s", contract)
        try:
            if not contract.is_file():
                raise PipelineAborted(Stage.DETECTING, AMBIGUOUS_CONTRACT, [f"Contract file not found: {contract}"])
            self._enter(result, Stage.EXTRACTING_METADATA)
            source = contract.read_text(encoding="utf-8")
            entities = extract_entities(source, self._extractors)
            metadata = self._synthesize(source, contract, options, entities)
            result.metadata = metadata
            target = (
                Path(options.output_path).expanduser().resolve()
                if options.output_path
                else contract.parent / self.config.metadata_file
            )
            result.metadata_path = self._write_metadata(target, metadata, result.stage)
            self._enter(result, Stage.VALIDATING)
            self._validate(metadata, result.stage)
        except PipelineAborted as exc:
            return self._abort_build(result, exc)
        except Exception as exc:
            self.logger.debug("Unexpected metadata error", exc_info=True)
            return self._abort_build(result, PipelineAborted(result.stage, UNEXPECTED_ERROR, [str(exc)]))
        result.stage = Stage.DONE
        return result

    def generate_docs(
        self,
        contract_path: Path | str,
        metadata_path: Path | str,
        options: BuildOptions | None = None,
    ) -> BuildResult:
        """Render documentation for a contract from an existing metadata file."""
        options = options or BuildOptions()
        contract = Path(contract_path).expanduser().resolve()
        metadata_file = Path(metadata_path).expanduser().resolve()
        result = BuildResult(draft_dir=metadata_file.parent, stage=Stage.VALIDATING, contract_path=contract)
        self.logger.info("Generating documentation for %s", contract)
        try:
            if not contract.is_file():
                raise PipelineAborted(Stage.DETECTING, AMBIGUOUS_CONTRACT, [f"Contract file not found: {contract}"])
            metadata = self._read_metadata(metadata_file, Stage.VALIDATING)
            result.metadata = metadata
            result.metadata_path = metadata_file
            self._validate(metadata, result.stage)
            self._enter(result, Stage.RENDERING)
            entities = extract_entities(contract.read_text(encoding="utf-8"), self._extractors)
            document = self._render(metadata, entities, options, result.stage)
            target = (
                Path(options.output_path).expanduser().resolve()
                if options.output_path
                else metadata_file.parent / self.config.document_file
            )
            result.document_path = self._write_text(target, document, result.stage)
        except PipelineAborted as exc:
            return self._abort_build(result, exc)
        except Exception as exc:
            self.logger.debug("Unexpected docs error", exc_info=True)
            return self._abort_build(result, PipelineAborted(result.stage, UNEXPECTED_ERROR, [str(exc)]))
        result.stage = Stage.DONE
        return result

    # ------------------------------------------------------------------
    # Rebuild

    def run_rebuild(
        self,
        root: Path | str | None = None,
        *,
        template_path: Path | None = None,
        dry_run: bool = False,
    ) -> RebuildSummary:
        """Regenerate metadata and documentation for every catalog entry under ``root``."""
        catalog = Path(root).expanduser().resolve() if root else self.config.catalog_dir
        summary = RebuildSummary(root=catalog, dry_run=dry_run)
        self.logger.info("Rebuilding metadata and documentation under %s", catalog)
        if not catalog.is_dir():
            failure = PipelineFailure(Stage.VERIFYING, MISSING_STRUCTURE, (f"Starters directory not found: {catalog}",))
            log_failure(self.logger, failure.stage.value, [failure.reason, *failure.messages])
            summary.failure = failure
            return summary

        options = BuildOptions(template_path=template_path)
        entries = sorted(path for path in catalog.iterdir() if path.is_dir())
        if not entries:
            self.logger.warning("No starters found to rebuild")
        for entry in entries:
            self.logger.info("Rebuilding %s", entry.name)
            try:
                self._rebuild_entry(entry, options, dry_run)
            except PipelineAborted as exc:
                if exc.reason == TEMPLATE_MISSING:
                    summary.failure = exc.to_failure()
                    log_failure(self.logger, exc.stage.value, [exc.reason, *exc.messages])
                    return summary
                self.logger.warning("Skipping %s: %s", entry.name, exc.reason)
                for message in exc.messages:
                    self.logger.warning("  - %s", message)
                summary.skipped[entry.name] = [exc.reason, *exc.messages]
                continue
            except Exception as exc:
                self.logger.debug("Unexpected error rebuilding %s", entry.name, exc_info=True)
                self.logger.warning("Skipping %s: %s", entry.name, UNEXPECTED_ERROR)
                summary.skipped[entry.name] = [UNEXPECTED_ERROR, str(exc)]
                continue
            summary.rebuilt.append(entry.name)

        self.logger.info(
            "Rebuild complete: %d updated, %d skipped%s",
            len(summary.rebuilt),
            len(summary.skipped),
            " (dry run)" if dry_run else "",
        )
        return summary

    def _rebuild_entry(self, entry: Path, options: BuildOptions, dry_run: bool) -> None:
        metadata_path = entry / self.config.metadata_file
        existing = self._read_metadata(metadata_path, Stage.EXTRACTING_METADATA) if metadata_path.exists() else None
        contracts_dir = entry / CONTRACTS_DIRNAME
        contract_files = self._contract_files(contracts_dir) if contracts_dir.is_dir() else []

        entities: List[SourceEntity] = []
        if contract_files:
            contract_path = contract_files[0]
            if len(contract_files) > 1:
                self.logger.warning("Multiple contracts in %s; using %s", entry.name, contract_path.name)
            source = contract_path.read_text(encoding="utf-8")
            entities = extract_entities(source, self._extractors)
            defaults = self._curated_defaults(entry.name, existing)
            metadata = self._synthesize(source, contract_path, defaults, entities)
            if existing is not None and not metadata.tags and isinstance(existing.tags, list):
                metadata.tags = list(existing.tags)
        elif existing is not None:
            self.logger.warning("No contracts in %s; rendering from existing metadata", entry.name)
            metadata = existing
        else:
            raise PipelineAborted(Stage.DETECTING, AMBIGUOUS_CONTRACT, [f"No contracts or metadata in {entry}"])

        errors = list(self.validator.validate(metadata).errors)
        if metadata.name != entry.name:
            errors.append(f"name: '{metadata.name}' does not match directory name '{entry.name}'")
        if errors:
            raise PipelineAborted(Stage.VALIDATING, METADATA_INVALID, errors)

        document = self._render(metadata, entities, options, Stage.RENDERING)
        if dry_run:
            self.logger.info("(dry run) %s not written", self.config.document_file)
            return
        if contract_files:
            self._write_metadata(metadata_path, metadata, Stage.EXTRACTING_METADATA)
        document_path = self._write_text(entry / self.config.document_file, document, Stage.RENDERING)
        self.publisher.mirror_document(document_path.parent, entry.name, document_file=self.config.document_file)

    @staticmethod
    def _curated_defaults(name: str, existing: Optional[Metadata]) -> BuildOptions:
        options = BuildOptions(starter_name=name)
        if existing is None:
            return options
        if isinstance(existing.category, str) and existing.category:
            options.category = existing.category
        if isinstance(existing.chapter, str) and existing.chapter:
            options.chapter = existing.chapter
        if isinstance(existing.has_ui, bool):
            options.has_ui = existing.has_ui
        if isinstance(existing.version, str) and existing.version:
            options.version = existing.version
        return options

    # ------------------------------------------------------------------
    # Stage helpers

    def _synthesize(
        self,
        source: str,
        contract_path: Path,
        options: BuildOptions,
        entities: Sequence[SourceEntity],
    ) -> Metadata:
        try:
            return synthesize_metadata(
                source,
                contract_path,
                self.config,
                options.synthesis_defaults(),
                entities=entities,
            )
        except SynthesisError as exc:
            raise PipelineAborted(Stage.EXTRACTING_METADATA, SYNTHESIS_FAILED, [str(exc)]) from exc

    def _validate(self, metadata: Metadata, stage: Stage) -> None:
        report = self.validator.validate(metadata)
        if not report.ok:
            raise PipelineAborted(stage, METADATA_INVALID, report.errors)
        self.logger.info("Metadata valid")

    def _render(
        self,
        metadata: Metadata,
        entities: Sequence[SourceEntity],
        options: BuildOptions,
        stage: Stage,
    ) -> str:
        renderer = self._resolve_renderer(options)
        try:
            return renderer.render(metadata, entities)
        except TemplateMissingError as exc:
            raise PipelineAborted(stage, TEMPLATE_MISSING, [str(exc)]) from exc

    def _resolve_renderer(self, options: BuildOptions) -> DocumentRenderer:
        if options.template_path:
            return DocumentRenderer(options.template_path)
        if self.renderer is None:
            self.renderer = DocumentRenderer(self.config.template_path)
        return self.renderer

    def _read_metadata(self, path: Path, stage: Stage) -> Metadata:
        if not path.is_file():
            raise PipelineAborted(stage, METADATA_INVALID, [f"{path.name} not found in {path.parent}"])
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise PipelineAborted(stage, METADATA_INVALID, [f"Failed to parse {path}: {exc}"]) from exc
        if not isinstance(data, dict):
            raise PipelineAborted(stage, METADATA_INVALID, [f"{path} must contain a JSON object"])
        return Metadata.from_dict(data)

    def _write_metadata(self, path: Path, metadata: Metadata, stage: Stage) -> Path:
        payload = json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False) + "\n"
        return self._write_text(path, payload, stage)

    def _write_text(self, path: Path, content: str, stage: Stage) -> Path:
        self._checkpoint(stage)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.logger.debug("Wrote %s", path)
        return path

    def _copy_file(self, source: Path, target: Path, stage: Stage) -> None:
        self._checkpoint(stage)
        shutil.copyfile(source, target)
        self.logger.debug("Copied %s -> %s", source.name, target)

    def _contract_files(self, directory: Path) -> List[Path]:
        extension = self.config.contract_extension
        return sorted(path for path in directory.iterdir() if path.is_file() and path.suffix == extension)

    def _checkpoint(self, stage: Stage) -> None:
        if self._should_cancel is not None and self._should_cancel():
            raise PipelineAborted(stage, CANCELLED, ["Run cancelled before writing output"])

    def _enter(self, result: BuildResult, stage: Stage) -> None:
        result.stage = stage
        self.logger.info("Stage: %s", stage.value)

    def _abort_build(self, result: BuildResult, exc: PipelineAborted) -> BuildResult:
        result.failure = exc.to_failure()
        result.stage = Stage.ABORTED
        log_failure(self.logger, f"{exc.stage.value} ({exc.reason})", exc.messages)
        return result

    def _abort_publish(self, result: PublishResult, exc: PipelineAborted) -> PublishResult:
        result.failure = exc.to_failure()
        result.stage = Stage.ABORTED
        log_failure(self.logger, f"{exc.stage.value} ({exc.reason})", exc.messages)
        return result

    @staticmethod
    def _load_config(root: Path) -> StarterdocConfig:
        try:
            return load_config(root)
        except ConfigError:
            get_logger("orchestrator").warning("Ignoring unreadable configuration in %s", root)
            return StarterdocConfig.for_root(root)


__all__ = [
    "BuildOptions",
    "BuildResult",
    "Orchestrator",
    "PipelineAborted",
    "PipelineFailure",
    "PublishResult",
    "RebuildSummary",
    "Stage",
]
