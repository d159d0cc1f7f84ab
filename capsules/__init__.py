"""SpaceX capsules block: fetch, filter, paginate and render capsule records."""

__version__ = "1.0.0"
