"""symlinker - batch symbolic link creation with relative-path planning."""
