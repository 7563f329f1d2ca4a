"""Tests for the Easyroll integration."""
