"""wiring: container-managed assembly of the power switch example.

Each module is a component to be union-mounted with ``resolve_root``:
- console      → ``output`` stream (the current ``sys.stdout``)
- lighting     → ``switchable`` backed by a LightBulb
- ventilation  → ``switchable`` backed by a Fan
- power        → ``power_switch`` built around whichever ``switchable`` is mounted
- audit        → @patch wrapping ``switchable`` in LoggingSwitchable
"""
