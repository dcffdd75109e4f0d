"""
Routes package

One blueprint per module, registered in app.create_app().
"""
