"""Services — thin orchestration between the HTTP layer and the record store."""
