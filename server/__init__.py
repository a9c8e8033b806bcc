"""HTTP and WebSocket front end for the NMEA decoder."""
