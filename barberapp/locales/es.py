# barberapp/locales/es.py

STRINGS = {
    "services_page": {
        "category_other_services": "Otros Servicios",
    },
    "booking_form": {
        "name_error": "El nombre debe tener al menos 2 caracteres.",
        "phone_error": "Formato de número de teléfono inválido (ej., +1234567890).",
        "email_error": "Dirección de correo electrónico inválida.",
        "service_error": "Por favor, selecciona un servicio.",
        "date_error": "Por favor, selecciona una fecha.",
        "time_error": "Por favor, selecciona una hora.",
        "success_title": "¡Cita Reservada!",
        "success_description": "¡Gracias, {name}! Tu cita para {service_name} el {date} a las {time} está confirmada.",
        "error_title": "Fallo en la Reserva",
    },
    "login_page": {
        "login_success_title": "Inicio de Sesión Exitoso",
        "login_success_description": "Redirigiendo al panel de administración...",
        "login_fail_title": "Fallo de Inicio de Sesión",
        "login_fail_description": "Correo electrónico o contraseña inválidos.",
    },
    "admin_appointment": {
        "pending": "Pendiente",
        "confirmed": "Confirmada",
        "completed": "Completada",
        "cancelled": "Cancelada",
        "update_success_title": "Estado de la Cita Actualizado",
        "update_success_desc": "La cita ID {appointment_id} se ha establecido a {new_status}.",
        "update_error_title": "Fallo al Actualizar el Estado",
        "fetch_error_desc": "No se pudieron cargar las citas. Inténtalo de nuevo.",
        "invalid_date": "Fecha Inválida",
    },
    "admin_service": {
        "name_error": "El nombre del servicio debe tener al menos 3 caracteres.",
        "category_error": "La categoría debe tener al menos 2 caracteres.",
        "description_error": "La descripción debe tener al menos 5 caracteres.",
        "duration_error": "La duración debe ser un número positivo (minutos).",
        "price_error": "El precio debe ser un número positivo.",
        "active_error": "El estado activo debe ser verdadero o falso.",
        "status_active": "activo",
        "status_inactive": "inactivo",
        "update_success_title": "Servicio Actualizado",
        "update_success_desc": '"{service_name}" ha sido actualizado.',
        "add_success_title": "Servicio Añadido",
        "add_success_desc": '"{service_name}" ha sido añadido.',
        "toggle_success_title_activated": "Servicio Activado",
        "toggle_success_title_deactivated": "Servicio Desactivado",
        "toggle_success_desc": '"{service_name}" ahora está {status}.',
        "delete_success_title": "Servicio Eliminado",
        "delete_success_desc": '"{service_name}" ha sido eliminado.',
        "update_error_title": "Fallo al Actualizar",
        "add_error_title": "Fallo al Añadir",
        "toggle_error_title": "Fallo al Cambiar Estado",
        "delete_error_title": "Fallo al Eliminar",
        "fetch_error_title": "Fallo al Cargar",
        "fetch_error_desc": "No se pudieron cargar los servicios. Inténtalo de nuevo.",
        "error_generic_desc": "Ocurrió un error inesperado. Inténtalo de nuevo.",
    },
    "errors": {
        "not_found": "No se encontró {kind} {id}.",
        "validation": "Corrige los campos marcados: {fields}.",
        "unauthorized": "Se requiere autenticación.",
    },
}
