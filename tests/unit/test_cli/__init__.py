"""Tests for the aaptcmd CLI."""
