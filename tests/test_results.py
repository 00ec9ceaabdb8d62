import pytest

from ballotbox.results import percentage, summarize, tally, total_votes


def test_tally_counts_by_index_and_skips_missing():
    counts = tally([0, 0, 1])
    assert counts == {0: 2, 1: 1}
    assert 2 not in counts
    assert total_votes(counts) == 3


def test_zero_votes():
    counts = tally([])
    summary = summarize(["A", "B"], counts)

    assert counts == {}
    assert summary.total == 0
    assert [r.percentage for r in summary.rows] == [0.0, 0.0]


def test_percentage_of_zero_total():
    assert percentage(0, 0) == 0.0
    assert percentage(1, 4) == 25.0


def test_summary_order_and_percentages():
    summary = summarize(["A", "B", "C"], {0: 2, 1: 1})

    assert summary.total == 3
    assert [r.option for r in summary.rows] == ["A", "B", "C"]
    assert summary.rows[0].percentage == pytest.approx(66.7, abs=0.05)
    assert summary.rows[1].percentage == pytest.approx(33.3, abs=0.05)
    assert summary.rows[2].votes == 0
    assert summary.rows[2].percentage == 0.0


def test_ties_keep_option_order():
    summary = summarize(["A", "B", "C", "D"], {1: 2, 2: 3, 3: 2})
    assert [r.option for r in summary.rows] == ["C", "B", "D", "A"]
