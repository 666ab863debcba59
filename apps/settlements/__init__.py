"""Balances, suggested transfers and recorded payments between attendees."""
