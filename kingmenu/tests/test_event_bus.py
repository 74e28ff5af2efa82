import unittest
from kingmenu.events import web_observers
from kingmenu.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS, SELECTION_CHANGED
from kingmenu.events.event_helpers import publish_selection_changed


class TestEventBus(unittest.TestCase):

    def test_subscribe_publish_unsubscribe(self):
        bus = EventBus()
        received = []
        cb = lambda name, payload: received.append((name, payload))
        bus.subscribe("x", cb)
        bus.subscribe("x", cb)
        bus.publish("x", 1)
        self.assertEqual(received, [("x", 1)])
        bus.unsubscribe("x", cb)
        bus.unsubscribe("x", cb)
        bus.publish("x", 2)
        self.assertEqual(len(received), 1)

    def test_failing_subscriber_is_isolated(self):
        bus = EventBus()
        received = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe("x", broken)
        bus.subscribe("x", lambda name, payload: received.append(payload))
        with self.assertLogs("kingmenu.events.Event_Bus", level="ERROR"):
            bus.publish("x", "ok")
        self.assertEqual(received, ["ok"])


class TestWebObservers(unittest.TestCase):

    def setUp(self):
        web_observers.start()
        web_observers.clear()

    def test_events_are_buffered_with_cursor(self):
        publish_selection_changed("1", "added", 1)
        publish_selection_changed("2", "added", 2, bus=GLOBAL_EVENT_BUS)
        data = web_observers.get_events()
        self.assertEqual([e["dish_id"] for e in data["events"]], ["1", "2"])
        self.assertEqual(data["events"][0]["type"], SELECTION_CHANGED)
        newer = web_observers.get_events(since=data["events"][0]["id"])
        self.assertEqual([e["dish_id"] for e in newer["events"]], ["2"])
        self.assertEqual(newer["next_cursor"], data["next_cursor"])

    def test_start_is_idempotent(self):
        web_observers.start()
        publish_selection_changed("1", "added", 1)
        self.assertEqual(len(web_observers.get_events()["events"]), 1)
