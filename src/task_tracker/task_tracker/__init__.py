"""Task Tracker package.

Feature modules (users, tasks) hold plain domain objects and strategies;
a thin Flask controller layer sits on top.
"""
