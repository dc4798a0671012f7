"""
Controllers
===========
Glue between user input and the scene model.

Why is this file needed?
------------------------
1. State: The SceneStore owns the current snapshot and announces changes.
2. Input: The DragController turns pointer events into selection and
   object moves.

Note: Controllers may use Qt signals but must NOT render anything.
"""
