# Shared helpers for the Uniwise marketplace backend
