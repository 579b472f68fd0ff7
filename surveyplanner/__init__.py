"""
surveyplanner - Boustrophedon survey flight planning for camera drones
"""
