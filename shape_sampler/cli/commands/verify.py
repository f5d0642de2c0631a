"""Verify CLI command: run the statistical verifiers against one distribution."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from shape_sampler.cli.validation import parse_params
from shape_sampler.config.loader import load_config_with_precedence
from shape_sampler.distributions.factory import distribution_factory
from shape_sampler.schema.verify_config import VerificationConfig
from shape_sampler.sources.numpy_source import NumpyUniformSource
from shape_sampler.utils.logging import get_logger
from shape_sampler.verification import collision_test, goodness_of_fit, symmetry_test

console = Console()
log = get_logger(__name__, component="cli.verify")

SYMMETRIC_KINDS = {"central", "central_tailed"}


def _verdict(passed: bool) -> str:
    return "[green]PASS[/green]" if passed else "[red]FAIL[/red]"


def verify(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    distribution: Optional[str] = typer.Option(None, "--distribution", "-d", help="Shape family name"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Shape parameter as key=value"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    samples: Optional[int] = typer.Option(None, help="Goodness-of-fit sample count"),
    bins: Optional[int] = typer.Option(None, help="Goodness-of-fit bin count"),
    alpha: Optional[float] = typer.Option(None, help="Significance level"),
    collision_samples: Optional[int] = typer.Option(None, "--collision-samples", help="Collision test sample count"),
    buckets: Optional[int] = typer.Option(None, help="Collision test bucket count"),
    confidence: Optional[float] = typer.Option(None, help="Collision interval confidence"),
    low: Optional[float] = typer.Option(None, help="Lower edge of the binning window"),
    high: Optional[float] = typer.Option(None, help="Upper edge of the binning window"),
) -> None:
    """Run goodness-of-fit, collision and (for central shapes) symmetry tests."""

    defaults = VerificationConfig(distribution="central").to_dict()
    cli_values = {
        "distribution": distribution,
        "params": parse_params(param) or None,
        "seed": seed,
        "n_samples": samples,
        "n_bins": bins,
        "alpha": alpha,
        "collision_samples": collision_samples,
        "n_buckets": buckets,
        "confidence": confidence,
        "low": low,
        "high": high,
    }
    cfg = VerificationConfig.from_dict(load_config_with_precedence(config, cli_values, defaults))
    dist = distribution_factory(cfg.distribution, **cfg.params).create()
    source = NumpyUniformSource(cfg.seed)

    gof = goodness_of_fit(
        dist, source, n_samples=cfg.n_samples, n_bins=cfg.n_bins, low=cfg.low, high=cfg.high, alpha=cfg.alpha
    )
    coll = collision_test(
        dist,
        source,
        n_samples=cfg.collision_samples,
        n_buckets=cfg.n_buckets,
        low=cfg.low,
        high=cfg.high,
        confidence=cfg.confidence,
    )

    table = Table(title=f"Verification for {dist.shape_kind} (seed={cfg.seed})")
    table.add_column("Test")
    table.add_column("Statistic", justify="right")
    table.add_column("Acceptance", justify="right")
    table.add_column("Verdict")
    table.add_row(
        "goodness-of-fit",
        f"{gof.statistic:.3f}",
        f"<= {gof.critical_value:.3f} (dof={gof.degrees_of_freedom})",
        _verdict(gof.passed),
    )
    table.add_row(
        "collisions",
        f"{coll.observed_collisions}",
        f"[{coll.expected_range[0]:.1f}, {coll.expected_range[1]:.1f}]",
        _verdict(coll.passed),
    )
    verdicts = [gof.passed, coll.passed]
    if dist.shape_kind in SYMMETRIC_KINDS:
        sym = symmetry_test(dist, source, n_samples=cfg.n_samples, alpha=cfg.alpha)
        table.add_row("symmetry", f"{sym.statistic:.4f}", f"p > {sym.alpha}", _verdict(sym.passed))
        verdicts.append(sym.passed)
    console.print(table)

    if not all(verdicts):
        log.warning("Verification failed", extra={"shape_kind": dist.shape_kind})
        raise typer.Exit(code=2)
