"""Route blueprints for the task manager frontend."""
