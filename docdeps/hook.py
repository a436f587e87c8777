"""Build-event hook that reports include impact after a successful build."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from .config import BuildEnvironment, CheckConfig, ConfigError, load_config
from .git.diff import ChangedFileDetector
from .includes.strategies import ImpactStrategy, create_strategy
from .logging import get_logger
from .models import StatusUpdate
from .report.renderer import ReportRenderer
from .report.sinks import LoggingStatusSink, StatusSink

StrategyFactory = Callable[[Path, CheckConfig], ImpactStrategy]


class IncludeCheckHook:
    """Runs the include dependency check for one build event."""

    def __init__(
        self,
        config: CheckConfig | None = None,
        *,
        detector: ChangedFileDetector | None = None,
        sink: StatusSink | None = None,
        renderer: ReportRenderer | None = None,
        strategy_factory: StrategyFactory | None = None,
    ) -> None:
        self.config = config
        self.detector = detector or ChangedFileDetector()
        self.sink = sink or LoggingStatusSink()
        self._renderer = renderer
        self.strategy_factory = strategy_factory or create_strategy
        self.logger = get_logger("hook")

    def on_success(
        self, root: str | Path, environment: BuildEnvironment | None = None
    ) -> Optional[StatusUpdate]:
        """Handle the build's success event; returns the emitted update, if any."""
        repo_path = Path(root).expanduser().resolve()
        environment = environment or BuildEnvironment()
        config = self._resolve_config(repo_path).apply_environment(environment)

        if not config.enabled:
            self.logger.info("Include dependency check disabled; skipping")
            return None

        self.logger.info("Checking include dependencies in %s (%s mode)", repo_path, config.mode)
        strategy = self.strategy_factory(repo_path, config)
        renderer = self._resolve_renderer(config)

        changed_files = self._changed_files(repo_path, environment)
        relevant = strategy.relevant(changed_files)
        self.logger.debug(
            "%d changed files, %d relevant to the include check", len(changed_files), len(relevant)
        )

        if not relevant:
            update = renderer.no_changes(environment.base_ref, environment.head_ref)
        else:
            result = strategy.classify(relevant)
            update = renderer.render(result, base_url=environment.deploy_url)

        self.sink.show(update)
        return update

    def _changed_files(self, repo_path: Path, environment: BuildEnvironment) -> List[str]:
        if environment.modified_files is not None:
            return [path.replace("\\", "/") for path in environment.modified_files if path]

        base_ref, head_ref = environment.base_ref, environment.head_ref
        if not base_ref or not head_ref:
            missing = [name for name, value in (("base", base_ref), ("head", head_ref)) if not value]
            raise ConfigError(
                f"Missing {' and '.join(missing)} revision for the include dependency check; "
                "set CACHED_COMMIT_REF and COMMIT_REF or pass the modified file list"
            )
        return self.detector.changed_files(repo_path, base_ref, head_ref)

    def _resolve_config(self, repo_path: Path) -> CheckConfig:
        if self.config is not None:
            return self.config
        return load_config(repo_path)

    def _resolve_renderer(self, config: CheckConfig) -> ReportRenderer:
        if self._renderer is not None:
            return self._renderer
        return ReportRenderer(ignored_link_dirs=config.ignored_link_dirs)


__all__ = ["IncludeCheckHook"]
