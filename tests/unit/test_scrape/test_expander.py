"""Tests for auto-expansion of truncated sets."""

from quizlet_downloader.scrape.expander import AutoExpander, remaining_terms
from quizlet_downloader.scrape.selectors import DEFAULT_SELECTORS


class FakeNode:
    def __init__(self, text="", fail=False):
        self._text = text
        self._fail = fail
        self.clicks = 0

    @property
    def text(self):
        if self._fail:
            raise RuntimeError("stale element")
        return self._text

    def attr(self, name):
        return ""

    def click(self):
        self.clicks += 1

    def select_one(self, selector):
        return None

    def select(self, selector):
        return []


class FakeDocument:
    url = "https://quizlet.com/1/set/"

    def __init__(self, count_text=None, buttons=(), count_fails=False):
        self.count = FakeNode(count_text, fail=count_fails) if count_text is not None or count_fails else None
        self.buttons = list(buttons)

    def select_one(self, selector):
        if selector == DEFAULT_SELECTORS.set_count:
            return self.count
        return None

    def select(self, selector):
        if selector == DEFAULT_SELECTORS.show_more_button:
            return self.buttons
        return []


class TestExpand:
    def test_remaining_terms(self):
        assert remaining_terms(150, 100) == 50
        assert remaining_terms(80, 100) == 0

    def test_clicks_button_naming_remainder(self):
        """150 terms with a threshold of 100 looks for a button mentioning 50."""
        other = FakeNode("Show all")
        target = FakeNode("See 50 more terms")
        document = FakeDocument("150 terms", buttons=[other, target])

        assert AutoExpander().expand(document) is True
        assert target.clicks == 1
        assert other.clicks == 0

    def test_no_click_when_label_lacks_remainder(self):
        button = FakeNode("See 5 more terms")
        document = FakeDocument("150 terms", buttons=[button])

        assert AutoExpander().expand(document) is False
        assert button.clicks == 0

    def test_no_click_at_or_below_threshold(self):
        button = FakeNode("See 0 more terms")
        document = FakeDocument("100 terms", buttons=[button])

        assert AutoExpander().expand(document) is False
        assert button.clicks == 0

    def test_missing_indicator_is_noop(self):
        assert AutoExpander().expand(FakeDocument()) is False

    def test_errors_are_swallowed(self):
        """Expansion never raises."""
        document = FakeDocument(count_fails=True)
        assert AutoExpander().expand(document) is False

    def test_custom_threshold(self):
        button = FakeNode("See 30 more terms")
        document = FakeDocument("80 terms", buttons=[button])

        assert AutoExpander(threshold=50).expand(document) is True
        assert button.clicks == 1


class TestRunOnLoad:
    def test_runs_twice_with_delay(self):
        sleeps = []
        button = FakeNode("See 50 more terms")
        document = FakeDocument("150 terms", buttons=[button])

        expander = AutoExpander(delay=2.0, sleep=sleeps.append)
        assert expander.run_on_load(document) is True

        assert sleeps == [2.0]
        assert button.clicks == 2

    def test_reports_false_when_nothing_clicked(self):
        expander = AutoExpander(sleep=lambda _: None)
        assert expander.run_on_load(FakeDocument("20 terms")) is False
