"""Command-line entry point."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import parse_args
from .engine import SearchEngine
from .results import SearchReport

REPORT_FILE = "search_report.json"


def _format_duration(seconds: float) -> str:
    nanos = round(seconds * 1e9)
    if nanos >= 1_000_000_000:
        value, unit = seconds, "s"
    elif nanos >= 1_000_000:
        value, unit = nanos / 1e6, "ms"
    elif nanos >= 1_000:
        value, unit = nanos / 1e3, "µs"
    else:
        value, unit = nanos, "ns"
    return f"{value:.2f}{unit}"


def _format_float(value: float, spec: str) -> str:
    return "NaN" if math.isnan(value) else format(value, spec)


def format_report(report: SearchReport, benchmark: bool) -> str:
    """Render a report as the text shown after a search."""
    lines = [
        "",
        "📊 RÉSULTATS DE LA RECHERCHE",
        f"Fichiers analysés: {report.total_files_scanned}",
        f"Correspondances trouvées: {report.total_matches}",
        f"Durée totale: {_format_duration(report.total_duration)}",
    ]
    for result in report.results:
        lines += ["", f"📁 {result.file_path}"]
        for match in result.matches:
            if match.line_number > 0:
                lines.append(f"   Ligne {match.line_number}: '{match.content}'")
            else:
                lines.append("   Nom du fichier correspondant")
    if not report.results:
        lines += ["", "❌ Aucune correspondance trouvée."]
    if benchmark:
        perf = report.performance
        lines += [
            "",
            "⚡ PERFORMANCE",
            f"Fichiers/seconde: {_format_float(perf.files_per_second, '.2f')}",
            f"Temps moyen/fichier: {_format_duration(perf.average_scan_time)}",
            f"Utilisation threads: {_format_float(perf.thread_utilization * 100.0, '.1f')}%",
        ]
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a search from command-line arguments; return the exit status."""
    config = parse_args(argv)
    print("🔍 Moteur de recherche - Lancement...")
    print(f"Dossier: {config.path}")
    print(f"Pattern: {config.pattern}")
    print(f"Threads: {config.max_threads}")
    print("---")

    try:
        report = SearchEngine(config).search()
        print(format_report(report, config.benchmark))
        if config.benchmark:
            Path(REPORT_FILE).write_text(report.to_json(), encoding="utf-8")
            print(f"📄 Rapport sauvegardé dans {REPORT_FILE}")
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())