"""WebSocket server streaming live GPS fixes."""
