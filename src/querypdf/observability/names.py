# src/querypdf/observability/names.py

"""Standard metric names for querypdf observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Generation Metrics
# ============================================================================

# Duration
GENERATION_DURATION = "generation_duration"

# Counters
GENERATION_REQUESTS_TOTAL = "generation_requests_total"
GENERATION_ERRORS_TOTAL = "generation_errors_total"


# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"


# ============================================================================
# Ask Metrics
# ============================================================================

# Duration
ASK_DURATION = "ask_duration"

# Counters
ASK_REQUESTS_TOTAL = "ask_requests_total"
ASK_CACHE_HITS_TOTAL = "ask_cache_hits_total"
ASK_SUPERSEDED_TOTAL = "ask_superseded_total"
ASK_FAILED_TOTAL = "ask_failed_total"


# ============================================================================
# Summary Metrics
# ============================================================================

# Duration
SUMMARY_DURATION = "summary_duration"

# Gauges
SUMMARY_CHUNKS_TOTAL = "summary_chunks_total"
SUMMARY_CHUNKS_SAMPLED = "summary_chunks_sampled"

# Counters
SUMMARY_REFINEMENT_ERRORS_TOTAL = "summary_refinement_errors_total"


# ============================================================================
# Document Metrics
# ============================================================================

# Duration
DOCUMENT_LOAD_DURATION = "document_load_duration"

# Counters
DOCUMENT_LOADS_SUPERSEDED_TOTAL = "document_loads_superseded_total"
