# selection.py
# -----------------------------------------------------------------------------
# Click-driven selection state for the two map views.
# - DetailSelection: one country at a time + a current topic
# - ComparisonSelection: up to five countries, colour by position
# Both expose click_country(name) so the map router can drive either one.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import NamedTuple

from colors import COMPARISON_PALETTE, TOPIC_COLORS, comparison_fill, detail_fill
from dataset import TOPICS, Dataset, Topic

log = logging.getLogger(__name__)


class DetailState(NamedTuple):
    country: str | None
    topic: str | None


class TopicEntry(NamedTuple):
    topic: Topic
    title: str
    color: str
    text: str
    is_current: bool


class ComparisonEntry(NamedTuple):
    index: int
    country: str
    rate: float | None
    color: str


# ─────────────────────────────────────────────────────────────────────────────
# Detail mode
# ─────────────────────────────────────────────────────────────────────────────
class DetailSelection:
    """
    Idle <-> Viewing(country, topic).

    A click on a relevant country opens it on the first topic (re-clicking
    the open country keeps its topic); a click anywhere else closes the
    panel. The current topic is only highlighted, every topic is always
    rendered.
    """

    def __init__(self, dataset: Dataset, topics=TOPICS):
        if not topics:
            raise ValueError("DetailSelection needs at least one topic")
        self._dataset = dataset
        self._topics = tuple(topics)
        self._country = None
        self._topic = None

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def topics(self) -> tuple:
        return self._topics

    @property
    def country(self) -> str | None:
        return self._country

    @property
    def topic(self) -> str | None:
        return self._topic

    @property
    def is_viewing(self) -> bool:
        return self._country is not None

    @property
    def state(self) -> DetailState:
        return DetailState(self._country, self._topic)

    def click_country(self, name):
        if not self._dataset.is_relevant(name):
            if self.is_viewing:
                log.debug("closing %s: %r is not in the dataset", self._country, name)
            self.close()
            return
        if name != self._country:
            self._country = name
            self._topic = self._topics[0].key
            log.debug("viewing %s", name)

    def click_topic(self, key: str):
        if not self.is_viewing:
            return
        if key not in {t.key for t in self._topics}:
            log.debug("ignoring unknown topic %r", key)
            return
        self._topic = key

    def close(self):
        self._country = None
        self._topic = None

    def topic_entries(self) -> list[TopicEntry]:
        """All topics for the open country, in fixed order ([] when idle)."""
        if not self.is_viewing:
            return []
        return [
            TopicEntry(
                topic=t,
                title=t.title,
                color=TOPIC_COLORS.get(t.color, t.color),
                text=self._dataset.lookup(self._country, t.field, "") or "",
                is_current=(t.key == self._topic),
            )
            for t in self._topics
        ]

    def fill_for(self, name) -> str:
        return detail_fill(self._dataset.is_relevant(name), name == self._country)

    def __repr__(self) -> str:
        if not self.is_viewing:
            return "DetailSelection(Idle)"
        return f"DetailSelection(Viewing({self._country!r}, {self._topic!r}))"


# ─────────────────────────────────────────────────────────────────────────────
# Comparison mode
# ─────────────────────────────────────────────────────────────────────────────
class ComparisonSelection:
    """
    Ordered set of up to len(palette) countries; clicks toggle membership.

    Colours follow position, so removing an entry shifts the colours of
    everything after it. A click past capacity is dropped silently.
    """

    CAPACITY = len(COMPARISON_PALETTE)

    def __init__(self, dataset: Dataset, palette=COMPARISON_PALETTE):
        palette = tuple(palette)
        if len(palette) != self.CAPACITY:
            raise ValueError(f"Comparison palette needs exactly {self.CAPACITY} colours, got {len(palette)}")
        self._dataset = dataset
        self._palette = palette
        self._countries: list[str] = []

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def palette(self) -> tuple:
        return self._palette

    @property
    def countries(self) -> tuple:
        return tuple(self._countries)

    @property
    def is_full(self) -> bool:
        return len(self._countries) >= self.CAPACITY

    def click_country(self, name):
        if not self._dataset.is_relevant(name):
            return
        if name in self._countries:
            self._countries.remove(name)
            log.debug("removed %s -> %s", name, self._countries)
        elif not self.is_full:
            self._countries.append(name)
            log.debug("added %s -> %s", name, self._countries)

    def clear_all(self):
        self._countries = []

    def index_of(self, name) -> int | None:
        try:
            return self._countries.index(name)
        except ValueError:
            return None

    def color_of(self, name) -> str | None:
        i = self.index_of(name)
        return None if i is None else self._palette[i]

    def entries(self) -> list[ComparisonEntry]:
        return [
            ComparisonEntry(i, c, self._dataset.lookup(c), self._palette[i])
            for i, c in enumerate(self._countries)
        ]

    def fill_for(self, name) -> str:
        return comparison_fill(
            self._dataset.is_relevant(name),
            self.index_of(name),
            self._dataset.lookup(name),
            palette=self._palette,
        )

    def __len__(self) -> int:
        return len(self._countries)

    def __repr__(self) -> str:
        return f"ComparisonSelection({self._countries!r})"
