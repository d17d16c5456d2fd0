"""End-to-end sessions driven by macro input."""

import io as stdio
import json

import pytest

from questcalc.config import get_settings
from questcalc.console.input_source import InteractiveSource, ScriptedSource
from questcalc.console.io_manager import IOManager
from questcalc.console.runtime import ManualSolver, run_session
from questcalc.domain.enums import OutputLevel
from questcalc.domain.replay import decode_battle_replay
from questcalc.main import main
from questcalc.repository.results_store import load_results

NOW = 1_700_000_000

MACRO = """\
# heroes
nebra:10
done
quest1-1 a1,w2
y
a1,nebra:10
n
y
quest3-2
n
n
"""


def _ticking_clock():
    ticks = iter(range(1000))
    return lambda: float(next(ticks))


class StaticSolver:
    """Always answers with the first hero the player owns."""

    def solve(self, session, instance, available_heroes):
        instance.best_solution = session.make_army(available_heroes[:1])
        instance.total_fights_simulated = 7


class TestRunSession:
    def _io(self, make_reader, output, text):
        return IOManager(
            output_level=OutputLevel.CMD_OUTPUT,
            source=ScriptedSource.from_text(text, echo=False),
            interactive=InteractiveSource(make_reader([])),
            writer=output.append,
        )

    def test_manual_solutions(self, make_reader, output, session, tmp_path):
        io = self._io(make_reader, output, MACRO)
        target = tmp_path / "results.json"

        solved = run_session(
            io, session, ManualSolver(io, clock=_ticking_clock()), json_output=target, now=lambda: NOW
        )

        assert [instance.is_solved for instance in solved] == [True, False, False]
        assert session.army_names(solved[0].best_solution) == ["a1", "nebra:10"]
        assert solved[0].calculation_time == 1.0
        text = "".join(output)
        assert "Battle Replay (Use on Ingame Tournament Page):" in text
        assert text.count("Could not find a solution that beats this lineup.") == 2

        reports = load_results(target)
        assert len(reports) == 3
        assert reports[0].solution.monsters == ["a1", "nebra:10"]
        assert decode_battle_replay(reports[0].replay).date == NOW

    def test_unowned_hero_is_rejected(self, make_reader, output, session):
        io = self._io(make_reader, output, "done\nquest1-1\ny\ntiny:3,a1\na1\nn\n")

        solved = run_session(io, session, ManualSolver(io), now=lambda: NOW)

        assert session.army_names(solved[0].best_solution) == ["a1"]
        assert "Not one of your heroes: tiny:3\n" in output

    def test_custom_solver(self, make_reader, output, session):
        io = self._io(make_reader, output, "valor:4\n\n\nquest2-1\nn\n")

        solved = run_session(io, session, StaticSolver(), now=lambda: NOW)

        assert session.army_names(solved[0].best_solution) == ["valor:4"]
        assert solved[0].total_fights_simulated == 7

    def test_closed_input_ends_session(self, make_reader, output, session):
        io = self._io(make_reader, output, "done\n")
        with pytest.raises(EOFError):
            run_session(io, session, ManualSolver(io), now=lambda: NOW)


class TestMain:
    @pytest.fixture(autouse=True)
    def _isolated_settings(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_macro_file_session(self, tmp_path, capsys):
        macro = tmp_path / "macro.txt"
        macro.write_text("nebra:10\ndone\nquest1-1\ny\na1,nebra:10\n", encoding="utf-8")
        results = tmp_path / "out.json"

        status = main(["--macro-file", str(macro), "--silent", "--json-output", str(results)])

        assert status == 0
        assert "Battle Replay" in capsys.readouterr().out
        data = json.loads(results.read_text(encoding="utf-8"))
        assert data[0]["solution"]["monsters"] == ["a1", "nebra:10"]

    def test_closed_stdin_exits_cleanly(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", stdio.StringIO(""))

        assert main([]) == 0
        assert capsys.readouterr().out.endswith("\n")

    def test_missing_macro_file_falls_back(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr("sys.stdin", stdio.StringIO(""))

        assert main(["--macro-file", str(tmp_path / "missing.txt")]) == 0
        assert "Could not find Macro File. Switching to Manual Input." in capsys.readouterr().out

    def test_undecodable_macro_file_does_not_crash(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr("sys.stdin", stdio.StringIO(""))
        macro = tmp_path / "macro.txt"
        macro.write_bytes(b"nebra:10\n\xff\xfe\n")

        assert main(["--macro-file", str(macro)]) == 0
        assert "Enter Hero 2: " in capsys.readouterr().out

    def test_directory_macro_path_falls_back(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr("sys.stdin", stdio.StringIO(""))

        assert main(["--macro-file", str(tmp_path)]) == 0
        assert "Switching to Manual Input." in capsys.readouterr().out
