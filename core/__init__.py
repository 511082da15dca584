"""
wikipedia-agent core package.

Modules
───────
errors    — lookup error family (PageNotFound, SummaryUnavailable, TransportFailure)
provider  — encyclopedia provider protocol + the ``wikipedia``-library implementation
fetcher   — SummaryFetcher: topic in, lead summary out
models    — Pydantic response models (HealthStatus, VersionInfo)
"""
