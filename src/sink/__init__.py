"""Sentry sink — turns log events into error reports and ships them."""
