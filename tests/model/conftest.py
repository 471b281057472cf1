"""Shared test helpers for model tests."""

from laneboard.models import Card, Lane


def _make_card(card_id, title=None, info=""):
    """Helper to build a card."""
    return Card(id=card_id, title=title if title is not None else card_id.upper(), info=info)


def _make_lane(lane_id, *card_ids, title=None):
    """Helper to build a lane holding cards with the given ids."""
    return Lane(
        id=lane_id,
        title=title if title is not None else lane_id.title(),
        cards=tuple(_make_card(card_id) for card_id in card_ids),
    )


def _card_ids(lane):
    return [card.id for card in lane.cards]
