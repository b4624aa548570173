"""Command-line entry point to score a telemetry event log and persist the report."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Mapping

import yaml

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT_STR = str(Path(__file__).resolve().parents[1])
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project

_PROJECT_ROOT = bootstrap_project()

from fleet_risk.core.policy import RiskPolicy  # noqa: E402
from fleet_risk.infrastructure.ingestion.csv_loader import EventCSVLoader  # noqa: E402
from fleet_risk.infrastructure.reports import FileSystemRiskReportRepository  # noqa: E402
from fleet_risk.use_cases.build_risk_summary import BuildRiskSummaryUseCase  # noqa: E402
from fleet_risk.use_cases.generate_risk_report import (  # noqa: E402
    GenerateRiskReportUseCase,
    RiskReportArtifacts,
)
from fleet_risk.utils.logger import configure_logging, logger  # noqa: E402


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (_PROJECT_ROOT / path).resolve()


def load_config(config_path: Path) -> dict:
    with config_path.open("r", encoding="utf-8") as file:
        return yaml.safe_load(file) or {}


def run(events_path: Path, output_dir: Path, config: Mapping[str, Any]) -> RiskReportArtifacts:
    configure_logging(str((config.get("logging") or {}).get("level", "INFO")))
    policy = RiskPolicy.from_config(config)

    ingestion = config.get("ingestion") or {}
    loader = EventCSVLoader(
        events_path,
        columns=ingestion.get("columns"),
        dayfirst=bool(ingestion.get("dayfirst", False)),
    )
    output_dir.mkdir(parents=True, exist_ok=True)

    use_case = GenerateRiskReportUseCase(
        source=loader,
        summary_builder=BuildRiskSummaryUseCase.default(policy),
        repository=FileSystemRiskReportRepository(output_dir),
    )
    return use_case.execute()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Calcula perfiles de riesgo y la alerta de seguridad de un registro de eventos"
    )
    parser.add_argument(
        "--events",
        type=Path,
        required=True,
        help="Ruta del CSV de eventos vehiculares ya mapeado",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("reports/risk"),
        help="Directorio donde se guardarán el resumen JSON y los rankings CSV",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/risk_policy.yaml"),
        help="Archivo YAML con la política de riesgo",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_config(_resolve_path(args.config))
    artifacts = run(_resolve_path(args.events), _resolve_path(args.output_dir), config)

    summary = artifacts.summary
    logger.info("Período: {}", summary.period_label)
    logger.info("Alerta: {} - {}", summary.alert.severity.value, summary.alert.message)
    logger.info("Conclusión: {}", summary.conclusion)
    logger.info("Resumen guardado en: {}", artifacts.summary_path)
    for name, path in artifacts.ranking_paths.items():
        logger.info("Ranking '{}' guardado en {}", name, path)


if __name__ == "__main__":
    main()
