"""pygame driver: keyboard input and board drawing for the Falling Blocks engine."""
