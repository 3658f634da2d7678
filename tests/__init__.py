"""Tests - Test suite for the proof codecs."""
