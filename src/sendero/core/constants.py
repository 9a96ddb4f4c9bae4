"""Core constants."""

# Slot in the conversation state store holding the current node id
DEFAULT_STATE_KEY = "_current_node_id"

# Upper bound on parent hops while looking for a fallback `next`
DEFAULT_MAX_ANCESTOR_DEPTH = 256
