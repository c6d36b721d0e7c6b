"""HTTP and WebSocket front end for the elevator controller."""
