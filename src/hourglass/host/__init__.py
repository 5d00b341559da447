"""Host-side adapters that drive a CountdownTimer."""
