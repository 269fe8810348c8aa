"""
UI strings. Portuguese is the default; English is provided for non-Brazilian staff.
"""

DEFAULT_LANGUAGE = "pt"

LANGUAGE_OPTIONS = {"Português": "pt", "English": "en"}

TRANSLATIONS = {
    "pt": {
        # Navigation
        "navigation": "Navegação",
        "nav_dashboard": "Visão Geral",
        "nav_clients": "Clientes",
        "nav_cases": "Processos",
        "nav_agenda": "Agenda",
        "nav_theses": "Minhas Teses",
        "nav_ai": "IA Jurídica",
        "nav_finance": "Financeiro",
        "nav_admin": "Administrativo",
        "nav_settings": "Configurações",
        "sign_out": "Sair",
        "local_mode": "Modo local: dados salvos neste servidor.",
        "dev_mode": "Modo desenvolvedor",
        "language": "Idioma",
        # Common
        "search": "Buscar",
        "save": "Salvar",
        "cancel": "Cancelar",
        "add": "Adicionar",
        "edit": "Editar",
        "delete": "Excluir",
        "confirm": "Confirmar",
        "download": "Baixar",
        "saved": "Alterações salvas.",
        "all": "Todas",
        "name": "Nome",
        "phone": "Telefone",
        "date": "Data",
        "time": "Horário",
        "type": "Tipo",
        "area": "Área",
        "description": "Descrição",
        "description_required": "A descrição é obrigatória.",
        "notes": "Observações",
        "category": "Categoria",
        "amount": "Valor (R$)",
        "client": "Cliente",
        "case": "Processo",
        "cases": "Processos",
        "page_of": "Página {page} de {total} · {count} registros",
        "error_store": "Não foi possível acessar os dados. Tente novamente em instantes.",
        # Auth
        "auth_subtitle": "Gestão jurídica inteligente para o seu escritório.",
        "auth_login": "Entrar",
        "auth_signup": "Criar escritório",
        "auth_email": "E-mail",
        "auth_password": "Senha",
        "auth_full_name": "Seu nome completo",
        "auth_office_name": "Nome do escritório",
        "auth_login_button": "Entrar",
        "auth_signup_button": "Criar conta",
        "auth_fields_required": "Preencha todos os campos.",
        "auth_password_min_length": "A senha deve ter pelo menos {min} caracteres.",
        "auth_invalid_credentials": "E-mail ou senha inválidos.",
        "auth_email_not_verified": "Confirme seu e-mail antes de entrar.",
        "auth_email_taken": "Já existe uma conta com este e-mail.",
        "auth_check_email": "Escritório criado! Verifique seu e-mail para confirmar.",
        "auth_sign_in_failed": "Falha ao entrar: {error}",
        "auth_sign_up_failed": "Falha no cadastro: {error}",
        "auth_unavailable": "Autenticação indisponível: configure SUPABASE_URL e SUPABASE_KEY.",
        "auth_dev_access": "Acesso de desenvolvedor",
        "auth_dev_key": "Chave mestra",
        "auth_dev_rejected": "Chave inválida.",
        # Dashboard
        "dashboard_subtitle": "Resumo da carteira de processos.",
        "dashboard_active_cases": "Processos Ativos",
        "dashboard_claim_value": "Valor em Causa",
        "dashboard_critical_deadlines": "Prazos Críticos",
        "dashboard_productivity": "Produtividade",
        "dashboard_by_area": "Processos por Área",
        "dashboard_by_status": "Status da Carteira",
        "dashboard_upcoming": "Próximos compromissos",
        "dashboard_empty": "Nenhum processo cadastrado ainda.",
        # Clients
        "clients_new": "Novo cliente",
        "clients_edit": "Editar cliente",
        "clients_name": "Nome / Razão Social",
        "clients_document": "CPF / CNPJ",
        "clients_city": "Cidade / Estado",
        "clients_contacts": "Contatos",
        "clients_search_placeholder": "Buscar por nome ou CPF/CNPJ...",
        "clients_kind_all": "Todos os Tipos",
        "clients_kind_pf": "Pessoa Física",
        "clients_kind_pj": "Pessoa Jurídica",
        "clients_empty": "Nenhum cliente encontrado.",
        "clients_deleted": "Cliente excluído.",
        "clients_delete_blocked": "Ação bloqueada: este cliente possui {count} processo(s) vinculado(s).",
        # Cases
        "cases_new": "Novo processo",
        "cases_number": "Número",
        "cases_title": "Título",
        "cases_opposing_party": "Parte adversa",
        "cases_claim_value": "Valor da causa",
        "cases_filing_date": "Data de distribuição",
        "cases_responsible": "Responsável",
        "cases_next_deadline": "Próximo prazo",
        "cases_search_placeholder": "Buscar por título, número ou cliente...",
        "cases_empty": "Nenhum processo encontrado.",
        "cases_open": "Abrir processo",
        "cases_need_client": "Cadastre um cliente antes de criar processos.",
        "cases_required": "Número e título são obrigatórios.",
        "cases_tab_data": "Dados",
        "cases_tab_deadlines": "Prazos",
        "cases_tab_hearings": "Audiências",
        "cases_tab_finance": "Financeiro",
        "cases_tab_movements": "Andamentos",
        "cases_custom_fields": "Campos da área",
        "cases_confirm_delete": "Quero excluir este processo",
        "cases_deleted": "Processo excluído.",
        "cases_no_deadlines": "Nenhum prazo cadastrado.",
        "cases_add_deadline": "Adicionar prazo",
        "cases_no_hearings": "Nenhuma audiência cadastrada.",
        "cases_add_hearing": "Agendar audiência",
        "cases_hearing_location": "Local ou link da sala virtual",
        "cases_no_movements": "Nenhum andamento registrado.",
        "cases_add_movement": "Registrar andamento",
        # Agenda
        "agenda_overdue": "Atrasados",
        "agenda_today": "Hoje",
        "agenda_tomorrow": "Amanhã",
        "agenda_this_week": "Esta semana",
        "agenda_later": "Próximos",
        "agenda_empty": "Nenhum compromisso pendente.",
        "agenda_join": "Entrar na reunião",
        "agenda_open_case": "Abrir processo",
        "event_prazo": "Prazo",
        "event_audiencia": "Audiência",
        # Theses
        "theses_new": "Nova tese",
        "theses_title": "Título",
        "theses_content": "Conteúdo",
        "theses_library": "Biblioteca",
        "theses_search_placeholder": "Buscar por título ou descrição...",
        "theses_empty": "Nenhuma tese encontrada.",
        "theses_read": "Leitura",
        "theses_edit": "Editor",
        "theses_notebook": "Notebook IA",
        "theses_no_content": "Esta tese ainda não tem conteúdo.",
        "theses_generate_ai": "Gerar conteúdo com IA",
        "theses_confirm_delete": "Quero excluir esta tese",
        "theses_ask_placeholder": "Pergunte algo sobre esta tese...",
        "theses_clear_notebook": "Limpar conversa",
        # AI
        "ai_subtitle": "Utilize a IA para acelerar sua rotina.",
        "ai_disabled": "Recursos de IA desativados. Configure OPENAI_API_KEY.",
        "ai_working": "Processando com IA...",
        "ai_tab_summary": "Análise de Intimações",
        "ai_tab_draft": "Redação Automática",
        "ai_tab_research": "Pesquisa Inteligente",
        "ai_notice_label": "Cole o texto da publicação do Diário Oficial",
        "ai_analyze": "Analisar",
        "ai_summary": "Resumo",
        "ai_deadline_found": "Prazo Identificado",
        "ai_suggested_action": "Ação Sugerida",
        "ai_piece_type": "Tipo de Peça",
        "ai_facts": "Fatos do Caso",
        "ai_facts_placeholder": "Descreva o que aconteceu...",
        "ai_arguments": "Teses / Argumentos",
        "ai_arguments_placeholder": "Pontos chave da defesa/acusação...",
        "ai_generate_draft": "Gerar minuta",
        "ai_research_label": "Tema da pesquisa",
        "ai_research": "Pesquisar",
        "ai_sources": "Fontes Encontradas",
        # Finance
        "finance_gross": "Receita bruta",
        "finance_expenses": "Despesas",
        "finance_net": "Saldo líquido",
        "finance_contractual": "Honorários contratuais",
        "finance_success_fee": "Êxito projetado",
        "finance_loss_award": "Sucumbência projetada",
        "finance_projected_fees": "Honorários projetados",
        "finance_fee_config": "Contrato de honorários",
        "finance_success_percent": "Êxito (%)",
        "finance_loss_award_percent": "Sucumbência (%)",
        "finance_ledger": "Lançamentos",
        "finance_add_transaction": "Novo lançamento",
        "finance_no_transactions": "Nenhum lançamento registrado.",
        "finance_invalid_transaction": "Informe descrição e valor maior que zero.",
        "finance_kind_receita": "Receita",
        "finance_kind_despesa": "Despesa",
        "finance_month_revenue": "Receitas do mês",
        "finance_month_expense": "Despesas do mês",
        "finance_contractual_active": "Honorários contratuais (ativos)",
        "finance_chart_title": "Últimos {months} meses",
        "finance_revenue": "Receitas",
        "finance_expense": "Despesas",
        "finance_download_report": "Baixar relatório (PDF)",
        "finance_generate_report": "Gerar relatório (PDF)",
        # Admin
        "admin_offices": "Escritórios",
        "admin_users": "Usuários",
        "admin_office": "Escritório",
        "admin_office_name": "Nome do escritório",
        "admin_members": "{count} usuário(s)",
        "admin_no_offices": "Nenhum escritório cadastrado.",
        "admin_no_users": "Nenhum usuário cadastrado.",
        "admin_delete_warning": "Isso apagará o escritório e todos os registros vinculados. Prosseguir?",
        "admin_office_deleted": "Escritório excluído.",
        # Settings
        "settings_custom_fields": "Campos Personalizados por Área",
        "settings_field_label": "Rótulo do campo",
        "settings_field_label_required": "Informe o rótulo do campo.",
        "settings_data": "Dados",
        "settings_backend": "Armazenamento: {backend}",
        "settings_seed": "Carregar dados de demonstração",
        "settings_seeded": "Dados de demonstração carregados.",
        "settings_confirm_clear": "Quero apagar todos os dados",
        "settings_clear": "Apagar todos os dados",
        "settings_cleared": "Todos os dados foram apagados.",
    },
    "en": {
        # Navigation
        "navigation": "Navigation",
        "nav_dashboard": "Overview",
        "nav_clients": "Clients",
        "nav_cases": "Cases",
        "nav_agenda": "Agenda",
        "nav_theses": "My Theses",
        "nav_ai": "Legal AI",
        "nav_finance": "Finance",
        "nav_admin": "Administration",
        "nav_settings": "Settings",
        "sign_out": "Sign out",
        "local_mode": "Local mode: data is stored on this server.",
        "dev_mode": "Developer mode",
        "language": "Language",
        # Common
        "search": "Search",
        "save": "Save",
        "cancel": "Cancel",
        "add": "Add",
        "edit": "Edit",
        "delete": "Delete",
        "confirm": "Confirm",
        "download": "Download",
        "saved": "Changes saved.",
        "all": "All",
        "name": "Name",
        "phone": "Phone",
        "date": "Date",
        "time": "Time",
        "type": "Type",
        "area": "Area",
        "description": "Description",
        "description_required": "Description is required.",
        "notes": "Notes",
        "category": "Category",
        "amount": "Amount (R$)",
        "client": "Client",
        "case": "Case",
        "cases": "Cases",
        "page_of": "Page {page} of {total} · {count} records",
        "error_store": "Could not reach the data store. Please try again shortly.",
        # Auth
        "auth_subtitle": "Smart legal practice management.",
        "auth_login": "Sign in",
        "auth_signup": "Create office",
        "auth_email": "Email",
        "auth_password": "Password",
        "auth_full_name": "Your full name",
        "auth_office_name": "Office name",
        "auth_login_button": "Sign in",
        "auth_signup_button": "Create account",
        "auth_fields_required": "Please fill in all fields.",
        "auth_password_min_length": "Password must be at least {min} characters.",
        "auth_invalid_credentials": "Invalid email or password.",
        "auth_email_not_verified": "Please confirm your email before signing in.",
        "auth_email_taken": "An account with this email already exists.",
        "auth_check_email": "Office created! Check your email to confirm.",
        "auth_sign_in_failed": "Sign-in failed: {error}",
        "auth_sign_up_failed": "Sign-up failed: {error}",
        "auth_unavailable": "Authentication unavailable: set SUPABASE_URL and SUPABASE_KEY.",
        "auth_dev_access": "Developer access",
        "auth_dev_key": "Master key",
        "auth_dev_rejected": "Invalid key.",
        # Dashboard
        "dashboard_subtitle": "Case portfolio summary.",
        "dashboard_active_cases": "Active Cases",
        "dashboard_claim_value": "Amount in Dispute",
        "dashboard_critical_deadlines": "Critical Deadlines",
        "dashboard_productivity": "Productivity",
        "dashboard_by_area": "Cases by Area",
        "dashboard_by_status": "Portfolio Status",
        "dashboard_upcoming": "Upcoming events",
        "dashboard_empty": "No cases yet.",
        # Clients
        "clients_new": "New client",
        "clients_edit": "Edit client",
        "clients_name": "Name / Company name",
        "clients_document": "CPF / CNPJ",
        "clients_city": "City / State",
        "clients_contacts": "Contacts",
        "clients_search_placeholder": "Search by name or CPF/CNPJ...",
        "clients_kind_all": "All types",
        "clients_kind_pf": "Individual",
        "clients_kind_pj": "Company",
        "clients_empty": "No clients found.",
        "clients_deleted": "Client deleted.",
        "clients_delete_blocked": "Blocked: this client has {count} linked case(s).",
        # Cases
        "cases_new": "New case",
        "cases_number": "Number",
        "cases_title": "Title",
        "cases_opposing_party": "Opposing party",
        "cases_claim_value": "Claim value",
        "cases_filing_date": "Filing date",
        "cases_responsible": "Responsible",
        "cases_next_deadline": "Next deadline",
        "cases_search_placeholder": "Search by title, number or client...",
        "cases_empty": "No cases found.",
        "cases_open": "Open case",
        "cases_need_client": "Register a client before creating cases.",
        "cases_required": "Number and title are required.",
        "cases_tab_data": "Details",
        "cases_tab_deadlines": "Deadlines",
        "cases_tab_hearings": "Hearings",
        "cases_tab_finance": "Finance",
        "cases_tab_movements": "History",
        "cases_custom_fields": "Area fields",
        "cases_confirm_delete": "I want to delete this case",
        "cases_deleted": "Case deleted.",
        "cases_no_deadlines": "No deadlines.",
        "cases_add_deadline": "Add deadline",
        "cases_no_hearings": "No hearings.",
        "cases_add_hearing": "Schedule hearing",
        "cases_hearing_location": "Location or virtual room link",
        "cases_no_movements": "No history entries.",
        "cases_add_movement": "Add entry",
        # Agenda
        "agenda_overdue": "Overdue",
        "agenda_today": "Today",
        "agenda_tomorrow": "Tomorrow",
        "agenda_this_week": "This week",
        "agenda_later": "Later",
        "agenda_empty": "No pending events.",
        "agenda_join": "Join meeting",
        "agenda_open_case": "Open case",
        "event_prazo": "Deadline",
        "event_audiencia": "Hearing",
        # Theses
        "theses_new": "New thesis",
        "theses_title": "Title",
        "theses_content": "Content",
        "theses_library": "Library",
        "theses_search_placeholder": "Search by title or description...",
        "theses_empty": "No theses found.",
        "theses_read": "Read",
        "theses_edit": "Editor",
        "theses_notebook": "AI Notebook",
        "theses_no_content": "This thesis has no content yet.",
        "theses_generate_ai": "Generate content with AI",
        "theses_confirm_delete": "I want to delete this thesis",
        "theses_ask_placeholder": "Ask something about this thesis...",
        "theses_clear_notebook": "Clear conversation",
        # AI
        "ai_subtitle": "Use AI to speed up your routine.",
        "ai_disabled": "AI features are disabled. Set OPENAI_API_KEY.",
        "ai_working": "Working on it...",
        "ai_tab_summary": "Notice Analysis",
        "ai_tab_draft": "Drafting",
        "ai_tab_research": "Case-law Research",
        "ai_notice_label": "Paste the official gazette notice",
        "ai_analyze": "Analyze",
        "ai_summary": "Summary",
        "ai_deadline_found": "Deadline found",
        "ai_suggested_action": "Suggested action",
        "ai_piece_type": "Document type",
        "ai_facts": "Facts",
        "ai_facts_placeholder": "Describe what happened...",
        "ai_arguments": "Arguments",
        "ai_arguments_placeholder": "Key points of the claim or defence...",
        "ai_generate_draft": "Generate draft",
        "ai_research_label": "Research topic",
        "ai_research": "Search",
        "ai_sources": "Sources",
        # Finance
        "finance_gross": "Gross income",
        "finance_expenses": "Expenses",
        "finance_net": "Net balance",
        "finance_contractual": "Contractual fee",
        "finance_success_fee": "Projected success fee",
        "finance_loss_award": "Projected loss award",
        "finance_projected_fees": "Projected fees",
        "finance_fee_config": "Fee agreement",
        "finance_success_percent": "Success (%)",
        "finance_loss_award_percent": "Loss award (%)",
        "finance_ledger": "Ledger",
        "finance_add_transaction": "New entry",
        "finance_no_transactions": "No ledger entries.",
        "finance_invalid_transaction": "Enter a description and an amount above zero.",
        "finance_kind_receita": "Income",
        "finance_kind_despesa": "Expense",
        "finance_month_revenue": "Revenue this month",
        "finance_month_expense": "Expenses this month",
        "finance_contractual_active": "Contractual fees (active)",
        "finance_chart_title": "Last {months} months",
        "finance_revenue": "Revenue",
        "finance_expense": "Expenses",
        "finance_download_report": "Download report (PDF)",
        "finance_generate_report": "Generate report (PDF)",
        # Admin
        "admin_offices": "Offices",
        "admin_users": "Users",
        "admin_office": "Office",
        "admin_office_name": "Office name",
        "admin_members": "{count} user(s)",
        "admin_no_offices": "No offices.",
        "admin_no_users": "No users.",
        "admin_delete_warning": "This deletes the office and every linked record. Continue?",
        "admin_office_deleted": "Office deleted.",
        # Settings
        "settings_custom_fields": "Custom Fields per Area",
        "settings_field_label": "Field label",
        "settings_field_label_required": "Enter the field label.",
        "settings_data": "Data",
        "settings_backend": "Storage: {backend}",
        "settings_seed": "Load demo data",
        "settings_seeded": "Demo data loaded.",
        "settings_confirm_clear": "I want to erase all data",
        "settings_clear": "Erase all data",
        "settings_cleared": "All data erased.",
    },
}


def t(key: str, lang: str = None, **kwargs) -> str:
    if lang is None:
        lang = DEFAULT_LANGUAGE
    text = TRANSLATIONS.get(lang, TRANSLATIONS[DEFAULT_LANGUAGE]).get(key, key)
    if kwargs:
        text = text.format(**kwargs)
    return text
