"""HTTP layer of the Bookstore API, grouped by API version."""
