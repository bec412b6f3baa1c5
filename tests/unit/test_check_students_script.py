import importlib.util
from pathlib import Path

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "check_students.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("check_students", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_mock_run_prints_rows(clean_env, capsys):
    clean_env.setenv("MOCK_STUDENT_COUNT", "8")
    exit_code = _load_script().main(["--mock", "--limit", "4", "--show", "2"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out[0] == "OK: 4 student record(s)"
    assert len(out) == 3


def test_missing_backend_settings_fail(clean_env, capsys):
    exit_code = _load_script().main([])

    assert exit_code == 1
    assert "SUPABASE_URL" in capsys.readouterr().out
