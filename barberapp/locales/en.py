# barberapp/locales/en.py

STRINGS = {
    "services_page": {
        "category_other_services": "Other Services",
    },
    "booking_form": {
        "name_error": "Name must be at least 2 characters.",
        "phone_error": "Invalid phone number format (e.g., +1234567890).",
        "email_error": "Invalid email address.",
        "service_error": "Please select a service.",
        "date_error": "Please select a date.",
        "time_error": "Please select a time.",
        "success_title": "Appointment Booked!",
        "success_description": "Thanks, {name}! Your appointment for {service_name} on {date} at {time} is confirmed.",
        "error_title": "Booking Failed",
    },
    "login_page": {
        "login_success_title": "Login Successful",
        "login_success_description": "Redirecting to admin panel...",
        "login_fail_title": "Login Failed",
        "login_fail_description": "Invalid email or password.",
    },
    "admin_appointment": {
        "pending": "Pending",
        "confirmed": "Confirmed",
        "completed": "Completed",
        "cancelled": "Cancelled",
        "update_success_title": "Appointment Status Updated",
        "update_success_desc": "Appointment ID {appointment_id} set to {new_status}.",
        "update_error_title": "Status Update Failed",
        "fetch_error_desc": "Could not load appointments. Please try again.",
        "invalid_date": "Invalid Date",
    },
    "admin_service": {
        "name_error": "Service name must be at least 3 characters.",
        "category_error": "Category name must be at least 2 characters.",
        "description_error": "Description must be at least 5 characters.",
        "duration_error": "Duration must be a positive number (minutes).",
        "price_error": "Price must be a positive number.",
        "active_error": "Active status must be true or false.",
        "status_active": "active",
        "status_inactive": "inactive",
        "update_success_title": "Service Updated",
        "update_success_desc": '"{service_name}" has been updated.',
        "add_success_title": "Service Added",
        "add_success_desc": '"{service_name}" has been added.',
        "toggle_success_title_activated": "Service Activated",
        "toggle_success_title_deactivated": "Service Deactivated",
        "toggle_success_desc": '"{service_name}" is now {status}.',
        "delete_success_title": "Service Deleted",
        "delete_success_desc": '"{service_name}" has been deleted.',
        "update_error_title": "Update Failed",
        "add_error_title": "Add Failed",
        "toggle_error_title": "Status Change Failed",
        "delete_error_title": "Delete Failed",
        "fetch_error_title": "Fetch Failed",
        "fetch_error_desc": "Could not load services. Please try again.",
        "error_generic_desc": "An unexpected error occurred. Please try again.",
    },
    "errors": {
        "not_found": "{kind} {id} was not found.",
        "validation": "Please correct the highlighted fields: {fields}.",
        "unauthorized": "Authentication required.",
    },
}
