"""
Billing domain

Turns product interaction events into monthly per-brand bills.
"""
