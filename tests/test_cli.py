import json
from pathlib import Path

from filehunt.cli import format_report, main
from filehunt.results import Match, PerformanceStats, SearchReport, SearchResult


def _report(results):
    return SearchReport(
        total_files_scanned=5,
        total_matches=sum(len(r.matches) for r in results),
        total_duration=0.0015,
        results=results,
        performance=PerformanceStats(
            files_per_second=3333.0, average_scan_time=0.0003, thread_utilization=1.0
        ),
    )


def test_format_report_lists_matches():
    results = [
        SearchResult(Path("a.txt"), [Match(3, "found it", (0, 5))], 0.0),
        SearchResult(Path("needle.md"), [Match(0, "needle.md", (0, 9))], 0.0),
    ]
    text = format_report(_report(results), benchmark=False)
    assert "Fichiers analysés: 5" in text
    assert "Correspondances trouvées: 2" in text
    assert "📁 a.txt" in text
    assert "   Ligne 3: 'found it'" in text
    assert "   Nom du fichier correspondant" in text
    assert "Aucune correspondance" not in text
    assert "PERFORMANCE" not in text


def test_format_report_duration():
    text = format_report(_report([]), benchmark=False)
    assert "Durée totale: 1.50ms" in text


def test_format_report_without_results():
    text = format_report(_report([]), benchmark=False)
    assert text.endswith("❌ Aucune correspondance trouvée.")


def test_format_report_benchmark_section():
    text = format_report(_report([]), benchmark=True)
    assert "⚡ PERFORMANCE" in text
    assert "Fichiers/seconde: 3333.00" in text
    assert "Utilisation threads: 100.0%" in text


def test_main_content_search(tmp_path, capsys):
    (tmp_path / "doc.txt").write_text("one\ntarget line\n")
    status = main([str(tmp_path), "target", "--content"])
    out = capsys.readouterr().out
    assert status == 0
    assert f"Dossier: {tmp_path}" in out
    assert "Ligne 2: 'target line'" in out
    assert "Correspondances trouvées: 1" in out


def test_main_benchmark_writes_json(tmp_path, monkeypatch, capsys):
    (tmp_path / "match_me.txt").write_text("")
    monkeypatch.chdir(tmp_path)
    status = main([str(tmp_path), "match", "-b"])
    out = capsys.readouterr().out
    assert status == 0
    data = json.loads((tmp_path / "search_report.json").read_text(encoding="utf-8"))
    assert data["total_files_scanned"] == 1
    assert data["results"][0]["matches"][0]["content"] == "match_me.txt"
    assert "search_report.json" in out


def test_main_invalid_regex_fails(tmp_path, capsys):
    status = main([str(tmp_path), "(", "--regex"])
    assert status == 1
    assert "Error" in capsys.readouterr().err