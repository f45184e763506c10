# barberapp/locales/pt.py

STRINGS = {
    "services_page": {
        "category_other_services": "Outros Serviços",
    },
    "booking_form": {
        "name_error": "O nome deve ter pelo menos 2 caracteres.",
        "phone_error": "Formato de telefone inválido (ex., +5511999999999).",
        "email_error": "Endereço de e-mail inválido.",
        "service_error": "Por favor, selecione um serviço.",
        "date_error": "Por favor, selecione uma data.",
        "time_error": "Por favor, selecione um horário.",
        "success_title": "Agendamento Confirmado!",
        "success_description": "Obrigado, {name}! Seu horário para {service_name} em {date} às {time} está confirmado.",
        "error_title": "Falha no Agendamento",
    },
    "login_page": {
        "login_success_title": "Login Realizado",
        "login_success_description": "Redirecionando para o painel administrativo...",
        "login_fail_title": "Falha no Login",
        "login_fail_description": "E-mail ou senha inválidos.",
    },
    "admin_appointment": {
        "pending": "Pendente",
        "confirmed": "Confirmado",
        "completed": "Concluído",
        "cancelled": "Cancelado",
        "update_success_title": "Status do Agendamento Atualizado",
        "update_success_desc": "Agendamento ID {appointment_id} definido como {new_status}.",
        "update_error_title": "Falha ao Atualizar Status",
        "fetch_error_desc": "Não foi possível carregar os agendamentos. Tente novamente.",
        "invalid_date": "Data Inválida",
    },
    "admin_service": {
        "name_error": "O nome do serviço deve ter pelo menos 3 caracteres.",
        "category_error": "A categoria deve ter pelo menos 2 caracteres.",
        "description_error": "A descrição deve ter pelo menos 5 caracteres.",
        "duration_error": "A duração deve ser um número positivo (minutos).",
        "price_error": "O preço deve ser um número positivo.",
        "active_error": "O status ativo deve ser verdadeiro ou falso.",
        "status_active": "ativo",
        "status_inactive": "inativo",
        "update_success_title": "Serviço Atualizado",
        "update_success_desc": '"{service_name}" foi atualizado.',
        "add_success_title": "Serviço Adicionado",
        "add_success_desc": '"{service_name}" foi adicionado.',
        "toggle_success_title_activated": "Serviço Ativado",
        "toggle_success_title_deactivated": "Serviço Desativado",
        "toggle_success_desc": '"{service_name}" agora está {status}.',
        "delete_success_title": "Serviço Excluído",
        "delete_success_desc": '"{service_name}" foi excluído.',
        "update_error_title": "Falha ao Atualizar",
        "add_error_title": "Falha ao Adicionar",
        "toggle_error_title": "Falha ao Alterar Status",
        "delete_error_title": "Falha ao Excluir",
        "fetch_error_title": "Falha ao Carregar",
        "fetch_error_desc": "Não foi possível carregar os serviços. Tente novamente.",
        "error_generic_desc": "Ocorreu um erro inesperado. Tente novamente.",
    },
    "errors": {
        "not_found": "{kind} {id} não foi encontrado.",
        "validation": "Corrija os campos destacados: {fields}.",
        "unauthorized": "Autenticação necessária.",
    },
}
