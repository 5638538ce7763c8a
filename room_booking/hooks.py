app_name = "room_booking"
app_title = "Room Booking"
app_publisher = "Sebastian Ortiz Valencia"
app_description = "Reserva de salas de reuniones en slots fijos y disponibilidad diaria por sala"
app_email = "sebastianortiz989@gmail.com"
app_license = "mit"

# Apps
# ------------------

# required_apps = []

# Installation
# ------------

# before_install = "room_booking.install.before_install"
# after_install = "room_booking.install.after_install"

# Document Events
# ---------------
# Hook on document methods and events

# doc_events = {
# 	"*": {
# 		"on_update": "method",
# 		"on_cancel": "method",
# 		"on_trash": "method"
# 	}
# }

# Testing
# -------

# before_tests = "room_booking.install.before_tests"

# Automatically update python controller files with type annotations for this app.
# export_python_type_annotations = True
