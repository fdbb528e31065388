"""
Tests for Speech Hypothesis Selection

Tests picking the best plate among alternative transcriptions.
"""

from nopol.plates.candidates import select_best_candidate, hypotheses_from_lists
from nopol.schemas import RecognitionResult, BestCandidate


class TestSelectBestCandidate:
    """Test best candidate selection"""

    def test_invalid_high_confidence_ignored(self):
        """Test valid plate wins over more confident garbage"""
        best = select_best_candidate([("X999ZZ", 0.9), ("B999CC", 0.4)])
        assert best == BestCandidate(raw_text="B999CC", cleaned_plate="B999CC")

    def test_tie_keeps_first(self):
        """Test equal confidence keeps the earlier hypothesis"""
        best = select_best_candidate([
            RecognitionResult("B1234ABC", 0.5),
            RecognitionResult("D5678XY", 0.5),
        ])
        assert best.cleaned_plate == "B1234ABC"

    def test_higher_confidence_replaces(self):
        """Test strictly higher confidence wins"""
        assert select_best_candidate([("B1", 0.3), ("D2", 0.8)]).cleaned_plate == "D2"
        assert select_best_candidate([("B1", 0.8), ("D2", 0.3)]).cleaned_plate == "B1"

    def test_no_valid_hypothesis(self):
        """Test None when nothing cleans to a plate"""
        assert select_best_candidate([("Q1", 0.9), ("hello", 0.1)]) is None
        assert select_best_candidate([]) is None
        assert select_best_candidate(None) is None

    def test_raw_text_preserved(self):
        """Test the original text is returned next to the plate"""
        best = select_best_candidate([{"text": "Abi 1234 Abc", "confidence": 0.7}])
        assert best.raw_text == "Abi 1234 Abc"
        assert best.cleaned_plate == "AB1234ABC"

    def test_missing_confidence_defaults_to_zero(self):
        """Test plain strings count as zero confidence"""
        best = select_best_candidate(["hello", "B 2", "D 3"])
        assert best.cleaned_plate == "B2"

    def test_to_dict(self):
        """Test serialization"""
        best = select_best_candidate([("B 2", 0.1)])
        assert best.to_dict() == {"raw_text": "B 2", "cleaned_plate": "B2"}


class TestHypothesesFromLists:
    """Test pairing texts with scores"""

    def test_parallel_lists(self):
        """Test texts and scores zip together"""
        results = hypotheses_from_lists(["a", "b"], [0.9, 0.2])
        assert [(r.text, r.confidence) for r in results] == [("a", 0.9), ("b", 0.2)]

    def test_short_or_missing_scores(self):
        """Test missing scores become zero"""
        results = hypotheses_from_lists(["a", "b", "c"], [0.9])
        assert [r.confidence for r in results] == [0.9, 0.0, 0.0]
        assert all(r.confidence == 0.0 for r in hypotheses_from_lists(["a", "b"]))

    def test_empty(self):
        """Test no texts"""
        assert hypotheses_from_lists([]) == []
        assert hypotheses_from_lists(None, [0.5]) == []


class TestRecognitionResult:
    """Test hypothesis value object"""

    def test_confidence_clamped(self):
        """Test scores are kept in [0, 1]"""
        assert RecognitionResult("x", 1.5).confidence == 1.0
        assert RecognitionResult("x", -0.2).confidence == 0.0

    def test_bad_confidence(self):
        """Test junk scores become zero"""
        assert RecognitionResult("x", "abc").confidence == 0.0
        assert RecognitionResult("x", None).confidence == 0.0
        assert RecognitionResult("x", float("nan")).confidence == 0.0
        assert RecognitionResult("x", "0.4").confidence == 0.4

    def test_coerce_shapes(self):
        """Test building from recognizer output shapes"""
        assert RecognitionResult.coerce(("B 2", 0.3)) == RecognitionResult("B 2", 0.3)
        assert RecognitionResult.coerce({"text": "B 2"}) == RecognitionResult("B 2", 0.0)
        assert RecognitionResult.coerce("B 2") == RecognitionResult("B 2", 0.0)
        assert RecognitionResult.coerce(None).text == ""
