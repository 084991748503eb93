"""Delivery interfaces for the application."""
