from __future__ import annotations

import cProfile
import functools
import io
import logging
import pstats
import sys
from pathlib import Path
from typing import Any, Callable, ParamSpec, TypeVar, cast

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def profile(
    *,
    out_dir: Path,
    enabled: bool = True,
    target: Callable[..., Any] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Profiling decorator.

    Args:
        out_dir: Directory to save profile stats.
        enabled: Whether profiling is active.
        target: Optional specific function to profile.
                If None, profiles the decorated function (usually a benchmark).
                If provided, profiles ONLY this function's execution calls
                aggregated over the lifetime of the decorated function,
                e.g. target=Slice.append.
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        if not enabled:
            return fn

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            profiler = cProfile.Profile()

            def dump_stats():
                out_dir.mkdir(parents=True, exist_ok=True)

                fn_any = cast(Any, fn)
                base = fn_any.__name__

                if target:
                    target_any = cast(Any, target)
                    base += f"_target_{target_any.__name__}"

                prof_path = out_dir / f"{base}.prof"

                profiler.dump_stats(prof_path)
                logger.info("[profile] wrote %s", prof_path)

                try:
                    stats = pstats.Stats(str(prof_path))
                except (EOFError, TypeError):
                    logger.warning("[profile] no data collected for %s", base)
                    return

                cmds: list[str] = ["tottime", "cumtime", "calls"]
                paths: list[Path] = [out_dir / f"{base}.{x}.txt" for x in cmds]

                for path, cmd in zip(paths, cmds):
                    buf = io.StringIO()
                    stats_stream = pstats.Stats(str(prof_path), stream=buf)
                    stats_stream.sort_stats(cmd).print_stats(30)
                    path.write_text(buf.getvalue())
                    logger.info("[profile] wrote %s", path)

                total_time = getattr(stats, "total_tt", 0)
                logger.info("[profile] total time: %.4fs", total_time)

            if target is None:
                profiler.enable()
                try:
                    return fn(*args, **kwargs)
                finally:
                    profiler.disable()
                    dump_stats()

            # Targeted mode: patch 'target' to toggle the profiler on/off
            @functools.wraps(target)
            def target_interceptor(*t_args, **t_kwargs):
                profiler.enable()
                try:
                    return original_target(*t_args, **t_kwargs)
                finally:
                    profiler.disable()

            target_any = cast(Any, target)
            owner = sys.modules[target_any.__module__]
            path_parts = target_any.__qualname__.split(".")

            for part in path_parts[:-1]:
                owner = getattr(owner, part)
            method_name = path_parts[-1]

            original_target = getattr(owner, method_name)
            setattr(owner, method_name, target_interceptor)

            logger.info(
                "[profile] patching %s for targeted profiling",
                target_any.__qualname__,
            )

            try:
                return fn(*args, **kwargs)
            finally:
                setattr(owner, method_name, original_target)
                dump_stats()

        return wrapper

    return decorator
