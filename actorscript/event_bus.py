# actorscript/event_bus.py
"""
Rotation change notifications.

Every actor of a registry shares one bus. Hosts subscribe to learn when a
script commits one of an actor's rotation slots, either for all actors or for
a single actor id.
"""

import logging

logger = logging.getLogger(__name__)

ROTATION_CHANGED = "rotation_changed"


class EventBus:
    """Synchronous bus; handlers run inside the committing call."""

    def __init__(self):
        # event type -> [(actor id filter or None, callback)]
        self.subscribers = {}

    def subscribe(self, event_type, callback, actor_id=None):
        """
        Subscribe a callback to an event type.

        With ``actor_id`` set, only events whose source is that actor are
        delivered.
        """
        self.subscribers.setdefault(event_type, []).append((actor_id, callback))
        return callback

    def unsubscribe(self, event_type, callback):
        """Remove every subscription of ``callback`` to ``event_type``."""
        entries = self.subscribers.get(event_type, [])
        kept = [entry for entry in entries if entry[1] != callback]
        self.subscribers[event_type] = kept
        return len(kept) != len(entries)

    def publish(self, event_type, data=None, source=None):
        """Publish an event to all matching subscribers.

        A failing subscriber is logged and skipped; the remaining subscribers
        still run and the publisher never sees the exception.

        Args:
            event_type (str): The type of event being published.
            data (any, optional): Data associated with the event.
            source (str, optional): Actor id the event is about.

        Returns:
            int: Number of subscribers that handled the event.
        """
        event = {"type": event_type, "data": data, "source": source}

        count = 0
        for actor_filter, callback in list(self.subscribers.get(event_type, [])):
            if actor_filter is not None and actor_filter != source:
                continue
            try:
                callback(event)
                count += 1
            except Exception as e:
                logger.error(f"Error in {event_type} handler for actor {source}: {e}")
        return count

    def publish_rotation_changed(self, actor_id, slot, rotation):
        """Announce that ``slot`` of ``actor_id`` now holds ``rotation``."""
        logger.debug(f"{ROTATION_CHANGED}: {actor_id}.{slot}")
        return self.publish(ROTATION_CHANGED, {
            "actor_id": actor_id,
            "slot": slot,
            "rotation": rotation,
        }, source=actor_id)

    def clear(self):
        """Remove all subscriptions."""
        self.subscribers = {}
