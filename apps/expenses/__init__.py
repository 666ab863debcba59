"""
Expenses App - Who bought what

Expenses are itemized per event and optionally attributed to the attendee
who paid. Each expense can carry any number of receipt photos, stored one
row per receipt (``ExpenseReceipt``). Older clients that still send a single
``receiptUrl`` string, either a bare URL or a JSON-encoded array of URLs,
are decoded into receipt rows on the way in.

Per-expense exclusions (``ExpenseExclusion``) are stored and returned but do
not change balances; only the attendee-wide ``exclude_from_split`` flag does.

Architecture:
- Models: Expense, ExpenseReceipt, ExpenseExclusion
- Services: expense_management, receipt_management
- Receipts: file validation, storage and legacy URL decoding
- Views: ExpenseViewSet + standalone upload endpoint
"""
