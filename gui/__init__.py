"""Desktop front-end for the task list.

``gui.controller`` and ``gui.state`` hold the logic and import without a
display server. Widget modules (views, components, app) need Tkinter.
"""
