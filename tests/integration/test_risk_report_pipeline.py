"""Integration test for the CSV to risk report pipeline."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")

from scripts.generate_risk_report import load_config, run

ROOT = Path(__file__).resolve().parents[2]


def test_full_risk_report_pipeline(tmp_path):
    rows = []
    for hour in (6, 7, 8):
        rows.append(("2024-01-05 %02d:10:00" % hour, "Operador 1", "TRK-01", "D1", "45"))
    rows.append(("2024-01-06 14:00:00", "Operador 2", "TRK-02", "D3", "92"))
    rows.append(("2024-01-07 19:30:00", "", "TRK-02", "D1", ""))
    rows.append(("2024-01-07 20:00:00", "Operador 2", "TRK-02", "Ignicion", "0"))
    events_path = tmp_path / "eventos.csv"
    pd.DataFrame(rows, columns=["fecha", "operador", "vehiculo", "evento", "velocidad"]).to_csv(
        events_path, index=False
    )
    output_dir = tmp_path / "reports"

    config = load_config(ROOT / "configs" / "risk_policy.yaml")
    artifacts = run(events_path, output_dir, config)

    summary = artifacts.summary
    assert summary.total_events == 6
    assert summary.alert.severity.value == "CRITICAL"
    assert summary.alert.related_operator == "Operador 1"
    assert summary.worst_event.vehicle_id == "TRK-02"

    saved = json.loads(artifacts.summary_path.read_text(encoding="utf-8"))
    assert saved["alert"]["code"] == "CRITICAL_FATIGUE"
    operators = pd.read_csv(artifacts.ranking_paths["operators"])
    assert set(operators["entity"]) == {"Operador 1", "Operador 2", "Sin operador"}
    assert operators["score"].between(0, 100).all()
