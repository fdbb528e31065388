"""
Tests for Nopol Command Line
"""

from nopol.cli import main


class TestCli:
    """Test CLI commands"""

    def test_clean(self, capsys):
        """Test cleaning from the command line"""
        assert main(["clean", "Abi 1234 Abc"]) == 0
        out = capsys.readouterr().out
        assert "AB1234ABC" in out
        assert "AB 1234 ABC" in out

    def test_clean_failure(self, capsys):
        """Test exit status when no plate is found"""
        assert main(["clean", "B 2", "Q 1"]) == 1
        out = capsys.readouterr().out
        assert "B2" in out
        assert "no valid plate" in out

    def test_best(self, capsys):
        """Test choosing among hypotheses"""
        assert main(["best", "X999ZZ:0.9", "B999CC:0.4"]) == 0
        assert "Interpreted: B999CC" in capsys.readouterr().out

    def test_best_without_confidence(self, capsys):
        """Test hypotheses without scores"""
        assert main(["best", "hello", "D 3"]) == 0
        assert "Interpreted: D3" in capsys.readouterr().out

    def test_best_none(self, capsys):
        """Test no valid hypothesis"""
        assert main(["best", "hello"]) == 1

    def test_prefixes(self, capsys):
        """Test prefix listing"""
        assert main(["prefixes"]) == 0
        out = capsys.readouterr().out
        assert "DK  Bali" in out
        assert "B   Jakarta" in out
