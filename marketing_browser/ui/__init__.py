"""
Dash adapter for the marketing browser: layout builders and callbacks that
drive a ViewCoordinator from browser events.
"""
