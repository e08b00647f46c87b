"""
handlers/ - Presentation Layer
================================
Telegram handlers. `dispatcher.dispatch_message` receives every text update,
routes it to a command handler or to the pending balance lookup, and each
handler sends back whatever its Service returns.
"""
