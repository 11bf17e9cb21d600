"""LifeView desktop app entry points."""
