from match3.events.bus import EventBus, EVENT_SCORE_CHANGED


def test_payload_reaches_handler_with_bus_as_sender():
    bus = EventBus()
    calls = []
    bus.subscribe(EVENT_SCORE_CHANGED, lambda sender, **payload: calls.append((sender, payload)))

    bus.emit(EVENT_SCORE_CHANGED, score=300, delta=100, moves=27)

    assert calls == [(bus, {'score': 300, 'delta': 100, 'moves': 27})]


def test_handler_survives_without_outside_reference():
    bus = EventBus()
    calls = []

    class Listener:
        def on_score(self, sender, **payload):
            calls.append(payload['score'])

    bus.subscribe(EVENT_SCORE_CHANGED, Listener().on_score)
    bus.emit(EVENT_SCORE_CHANGED, score=5, delta=5, moves=1)
    assert calls == [5]


def test_emit_without_subscribers_is_noop():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []
    handler = lambda sender, **kwargs: calls.append(kwargs)
    bus.subscribe("ping", handler)
    bus.emit("ping", n=1)
    bus.unsubscribe("ping", handler)
    bus.emit("ping", n=2)
    assert calls == [{"n": 1}]
