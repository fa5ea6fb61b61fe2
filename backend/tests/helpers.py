NAMESPACE = '/ws'


def received(test_client, name=None):
    """Drain the client's queue, optionally keeping only payloads of event ``name``."""
    packets = test_client.get_received(NAMESPACE)
    if name is None:
        return packets
    return [p['args'][0] if p['args'] else None for p in packets if p['name'] == name]


def submit(test_client, player_id, points, slot='A'):
    test_client.emit('submit_score', {'playerId': player_id, 'points': points, 'slotLabel': slot}, namespace=NAMESPACE)


class FlakySocketIO:
    """Records emits and fails for the sids listed in ``broken``."""

    def __init__(self, broken=()):
        self.broken = set(broken)
        self.sent = []

    def emit(self, event, payload, to=None, namespace=None):
        if to in self.broken:
            raise ConnectionError('gone')
        self.sent.append((to, event, payload, namespace))
