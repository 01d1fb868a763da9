"""
icvm command-line driver tests
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
import icvm


class TestRun:
    def test_result_printed(self, capsys):
        assert icvm.main(["run", "1,0,0,0,99"]) == 0
        assert capsys.readouterr().out == "Result: 2\n"

    def test_outputs_labelled_in_order(self, capsys):
        assert icvm.main(["run", "104,1,104,-2,99"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Output: 1", "Output: -2", "Result: 104",
        ]

    def test_bundled_program_with_input(self, capsys):
        assert icvm.main(["run", "day9", "--input", "1"]) == 0
        assert "Output: 3780860499" in capsys.readouterr().out

    def test_program_file(self, tmp_path, capsys):
        path = tmp_path / "echo.txt"
        path.write_text("3,0,4,0,99\n")
        assert icvm.main(["run", str(path), "-i", "17"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Output: 17", "Result: 17"]

    def test_machine_fault_exit_status(self, capsys):
        assert icvm.main(["run", "3,0,99"]) == 1
        assert "Machine fault: Input exhausted" in capsys.readouterr().err

    def test_bad_program_text(self, capsys):
        assert icvm.main(["run", "1,x"]) == 1
        assert "Program error" in capsys.readouterr().err

    def test_max_steps(self, capsys):
        assert icvm.main(["run", "1105,1,0", "--max-steps", "10"]) == 1
        assert "Stopped: TIMEOUT" in capsys.readouterr().err

    def test_trace(self, capsys):
        assert icvm.main(["run", "1101,2,3,0,99", "--trace"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "Result: 5\n"
        assert "0000 Add mem[0], 2=2, 3=3" in captured.err


class TestDisasm:
    def test_listing(self, capsys):
        assert icvm.main(["disasm", "1,0,0,0,99"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "0000 Add mem[0], mem[0], mem[0]",
            "0004 Terminate",
        ]

    def test_show_memory(self, capsys):
        assert icvm.main(["disasm", "204,3,99,42", "--show-memory"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == \
            "0000 Output mem[relative_base+3]=42"


class TestSearch:
    def test_day2(self, capsys):
        assert icvm.main(["search", "day2"]) == 0
        assert capsys.readouterr().out == "noun=54 verb=85 answer=5485\n"

    def test_no_match(self, capsys):
        assert icvm.main(["search", "1,0,0,0,99", "--target=-1"]) == 1
        assert "No noun/verb pair" in capsys.readouterr().err


class TestArguments:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            icvm.main([])

    def test_log_file(self, tmp_path, capsys):
        log_path = tmp_path / "logs" / "icvm.log"
        assert icvm.main(["--log-file", str(log_path), "run", "99"]) == 0
        assert log_path.exists()
        assert "halt after 0 steps" in log_path.read_text()
