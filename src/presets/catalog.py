"""Entity preset catalog.

The literal table every generator run reads from.  Keys are the uppercase
entity-type tags accepted on the command line.  Field order matters: the
first four fields become mobile-card fields and the first five become table
columns.
"""

from __future__ import annotations

from src.presets.models import EntityPreset, Module

ENTITY_PRESETS: dict[str, EntityPreset] = {
    # -- CRM ---------------------------------------------------------------
    "ACCOUNT": EntityPreset(
        title="Account",
        title_plural="Accounts",
        smart_code="HERA.CRM.CORE.ENTITY.ACCOUNT.v1",
        module=Module.CRM,
        icon="Building2",
        primary_color="#107c10",
        accent_color="#0b5a0b",
        description="Company accounts and organizations",
        default_fields=("industry", "website", "employees", "revenue", "owner", "phone", "email"),
        kpi_metrics=("total_accounts", "active_accounts", "monthly_new", "avg_revenue"),
        business_rules={"duplicate_detection", "audit_trail"},
    ),
    "LEAD": EntityPreset(
        title="Lead",
        title_plural="Leads",
        smart_code="HERA.CRM.LEAD.ENTITY.LEAD.v1",
        module=Module.CRM,
        icon="Target",
        primary_color="#d83b01",
        accent_color="#a62d01",
        description="Sales prospects and potential customers",
        default_fields=("email", "phone", "company", "source", "score", "owner", "status"),
        kpi_metrics=("total_leads", "qualified_leads", "conversion_rate", "avg_score"),
        business_rules={"status_workflow", "audit_trail"},
    ),
    "OPPORTUNITY": EntityPreset(
        title="Opportunity",
        title_plural="Opportunities",
        smart_code="HERA.CRM.PIPELINE.ENTITY.OPPORTUNITY.v1",
        module=Module.CRM,
        icon="TrendingUp",
        primary_color="#6264a7",
        accent_color="#464775",
        description="Sales opportunities and deals in pipeline",
        default_fields=("account", "contact", "value", "stage", "probability", "close_date", "owner"),
        kpi_metrics=("total_value", "weighted_value", "win_rate", "avg_deal_size"),
        business_rules={"status_workflow", "requires_approval", "audit_trail"},
    ),
    "ACTIVITY": EntityPreset(
        title="Activity",
        title_plural="Activities",
        smart_code="HERA.CRM.ACTIVITY.ENTITY.TASK.v1",
        module=Module.CRM,
        icon="Calendar",
        primary_color="#8764b8",
        accent_color="#5a4476",
        description="Tasks, meetings, calls, and other activities",
        default_fields=("subject", "type", "related_to", "due_date", "owner", "priority", "status"),
        kpi_metrics=("total_activities", "completed_activities", "overdue", "by_type"),
        business_rules={"status_workflow", "audit_trail"},
    ),
    # -- MCA (multi-channel automation) --------------------------------------
    "CONTACT": EntityPreset(
        title="Contact",
        title_plural="Contacts",
        smart_code="HERA.CRM.MCA.ENTITY.CONTACT.v1",
        module=Module.MCA,
        icon="User",
        primary_color="#0078d4",
        accent_color="#005a9e",
        description="Person records with GDPR fields and multi-channel identities",
        default_fields=(
            "email", "phone", "title", "account", "department",
            "owner", "locale", "timezone", "consent_status",
        ),
        kpi_metrics=("total_contacts", "active_contacts", "monthly_new", "by_account", "consent_rate"),
        business_rules={"duplicate_detection", "audit_trail", "gdpr_compliance", "consent_tracking"},
    ),
    "CHANNEL_IDENTITY": EntityPreset(
        title="Channel Identity",
        title_plural="Channel Identities",
        smart_code="HERA.CRM.MCA.ENTITY.CHANNEL_IDENTITY.v1",
        module=Module.MCA,
        icon="Mail",
        primary_color="#8764b8",
        accent_color="#5a4476",
        description="Communication addresses and handles per contact",
        default_fields=("contact_id", "channel_type", "address", "verified", "preferred", "status"),
        kpi_metrics=("total_identities", "verified_rate", "by_channel", "bounce_rate"),
        business_rules={"duplicate_detection", "audit_trail", "requires_verification"},
    ),
    "CONSENT_PREF": EntityPreset(
        title="Consent Preference",
        title_plural="Consent Preferences",
        smart_code="HERA.CRM.MCA.ENTITY.CONSENT_PREF.v1",
        module=Module.MCA,
        icon="Shield",
        primary_color="#107c10",
        accent_color="#0b5a0b",
        description="GDPR consent management with legal basis",
        default_fields=("contact_id", "purpose", "status", "legal_basis", "source", "evidence", "expires_at"),
        kpi_metrics=("opt_in_rate", "revocations", "by_purpose", "compliance_score"),
        business_rules={"audit_trail", "gdpr_compliance", "requires_evidence"},
    ),
    "TEMPLATE": EntityPreset(
        title="Template",
        title_plural="Templates",
        smart_code="HERA.CRM.MCA.ENTITY.TEMPLATE.v1",
        module=Module.MCA,
        icon="FileText",
        description="Omni-channel templates with WCAG 2.1 AA compliance",
        default_fields=("name", "channel_type", "subject", "blocks", "variables", "wcag_score", "version"),
        kpi_metrics=("total_templates", "wcag_pass_rate", "usage_count", "avg_engagement"),
        business_rules={"version_control", "wcag_validation", "audit_trail"},
    ),
    "SEGMENT": EntityPreset(
        title="Segment",
        title_plural="Segments",
        smart_code="HERA.CRM.MCA.ENTITY.SEGMENT.v1",
        module=Module.MCA,
        icon="Users",
        primary_color="#d83b01",
        accent_color="#a62d01",
        description="Dynamic audience definitions with DSL filters",
        default_fields=("name", "description", "dsl_filter", "audience_count", "last_compiled", "tags"),
        kpi_metrics=("total_segments", "avg_size", "compilation_time", "conversion_rate"),
        business_rules={"dynamic_compilation", "audit_trail", "performance_monitoring"},
    ),
    "CAMPAIGN": EntityPreset(
        title="Campaign",
        title_plural="Campaigns",
        smart_code="HERA.CRM.MCA.ENTITY.CAMPAIGN.v1",
        module=Module.MCA,
        icon="Send",
        primary_color="#6264a7",
        accent_color="#464775",
        description="Outbound message campaigns with scheduling",
        default_fields=("name", "segment_id", "template_id", "channel_mix", "schedule", "status", "results"),
        kpi_metrics=("send_rate", "delivery_rate", "open_rate", "click_rate", "conversion_rate"),
        business_rules={"consent_validation", "schedule_optimization", "real_time_tracking", "audit_trail"},
    ),
    "SHORT_LINK": EntityPreset(
        title="Short Link",
        title_plural="Short Links",
        smart_code="HERA.CRM.MCA.ENTITY.SHORT_LINK.v1",
        module=Module.MCA,
        icon="Link",
        primary_color="#00bcf2",
        accent_color="#0078d4",
        description="Click tracking and UTM parameter management",
        default_fields=("alias", "destination", "campaign_id", "utm_params", "clicks", "unique_clicks", "status"),
        kpi_metrics=("total_clicks", "unique_rate", "conversion_rate", "top_sources"),
        business_rules={"click_tracking", "utm_attribution", "real_time_analytics", "audit_trail"},
    ),
    # -- Inventory -----------------------------------------------------------
    "PRODUCT": EntityPreset(
        title="Product",
        title_plural="Products",
        smart_code="HERA.INV.PRODUCT.ENTITY.ITEM.v1",
        module=Module.INV,
        icon="Package",
        primary_color="#00bcf2",
        accent_color="#0078d4",
        description="Products, items, and inventory assets",
        default_fields=("sku", "price", "cost", "category", "supplier", "stock", "unit"),
        kpi_metrics=("total_products", "low_stock", "total_value", "top_categories"),
        business_rules={"duplicate_detection", "audit_trail"},
    ),
    "WAREHOUSE": EntityPreset(
        title="Warehouse",
        title_plural="Warehouses",
        smart_code="HERA.INV.LOCATION.ENTITY.WAREHOUSE.v1",
        module=Module.INV,
        icon="Warehouse",
        primary_color="#005a9e",
        accent_color="#004578",
        description="Storage locations and bins",
        default_fields=("code", "address", "manager", "capacity", "utilization", "status"),
        kpi_metrics=("total_warehouses", "avg_utilization", "capacity_left"),
        business_rules={"audit_trail"},
    ),
    "STOCK_MOVEMENT": EntityPreset(
        title="Stock Movement",
        title_plural="Stock Movements",
        smart_code="HERA.INV.STOCK.ENTITY.MOVEMENT.v1",
        module=Module.INV,
        icon="ArrowLeftRight",
        primary_color="#0078d4",
        accent_color="#005a9e",
        description="Goods receipts, issues, and transfers between locations",
        default_fields=("sku", "from_location", "to_location", "quantity", "movement_type", "reference"),
        kpi_metrics=("movements_today", "transfer_volume", "adjustments"),
        business_rules={"batch_tracking", "audit_trail"},
    ),
    # -- Procurement ---------------------------------------------------------
    "VENDOR": EntityPreset(
        title="Vendor",
        title_plural="Vendors",
        smart_code="HERA.PROC.VENDOR.ENTITY.SUPPLIER.v1",
        module=Module.PROCUREMENT,
        icon="Truck",
        primary_color="#107c10",
        accent_color="#0b5a0b",
        description="Suppliers with payment terms and compliance status",
        default_fields=("company", "email", "phone", "payment_terms", "rating", "tax_id", "status"),
        kpi_metrics=("total_vendors", "avg_rating", "on_time_rate"),
        business_rules={"duplicate_detection", "requires_approval", "audit_trail"},
    ),
    "PURCHASE_REBATE": EntityPreset(
        title="Purchase Rebate",
        title_plural="Purchase Rebates",
        smart_code="HERA.PROC.REBATE.ENTITY.AGREEMENT.v1",
        module=Module.PROCUREMENT,
        icon="Percent",
        primary_color="#6264a7",
        accent_color="#464775",
        description="Volume rebate agreements with vendors",
        default_fields=("vendor", "rebate_rate", "threshold", "start_date", "end_date", "accrued", "status"),
        kpi_metrics=("active_agreements", "accrued_total", "claimed_total"),
        business_rules={"status_workflow", "requires_approval", "audit_trail"},
    ),
    "PURCHASE_ORDER": EntityPreset(
        title="Purchase Order",
        title_plural="Purchase Orders",
        smart_code="HERA.PROC.PO.ENTITY.ORDER.v1",
        module=Module.PROCUREMENT,
        icon="ShoppingCart",
        primary_color="#d83b01",
        accent_color="#a62d01",
        description="Purchase orders raised against vendors",
        default_fields=("vendor", "amount", "currency", "due_date", "buyer", "status"),
        kpi_metrics=("open_orders", "spend_mtd", "avg_cycle_time"),
        business_rules={"status_workflow", "requires_approval", "multi_currency", "audit_trail"},
    ),
    "REQUISITION": EntityPreset(
        title="Requisition",
        title_plural="Requisitions",
        smart_code="HERA.PROC.REQ.ENTITY.REQUISITION.v1",
        module=Module.PROCUREMENT,
        icon="ClipboardList",
        description="Internal purchase requests awaiting approval",
        default_fields=("requester", "department", "budget", "due_date", "justification", "status"),
        kpi_metrics=("pending_requests", "approved_mtd", "avg_approval_time"),
        business_rules={"status_workflow", "requires_approval", "audit_trail"},
    ),
    # -- Waste management ----------------------------------------------------
    "COLLECTION_ROUTE": EntityPreset(
        title="Collection Route",
        title_plural="Collection Routes",
        smart_code="HERA.WASTE.OPS.ENTITY.ROUTE.v1",
        module=Module.WASTE_MANAGEMENT,
        icon="Route",
        primary_color="#107c10",
        accent_color="#0b5a0b",
        description="Scheduled waste collection routes",
        default_fields=("zone", "vehicle", "driver", "frequency", "stops", "status"),
        kpi_metrics=("routes_active", "avg_stops", "completion_rate"),
        business_rules={"route_optimization", "status_workflow", "audit_trail"},
    ),
    "WASTE_PICKUP": EntityPreset(
        title="Waste Pickup",
        title_plural="Waste Pickups",
        smart_code="HERA.WASTE.OPS.ENTITY.PICKUP.v1",
        module=Module.WASTE_MANAGEMENT,
        icon="Trash",
        primary_color="#498205",
        accent_color="#3b6a04",
        description="Individual pickups with weight and segregation data",
        default_fields=("customer", "pickup_date", "waste_category", "weight", "segregation_score", "status"),
        kpi_metrics=("pickups_today", "tonnage", "segregation_rate"),
        business_rules={"weight_verification", "status_workflow", "audit_trail"},
    ),
    "RECYCLING_CENTER": EntityPreset(
        title="Recycling Center",
        title_plural="Recycling Centers",
        smart_code="HERA.WASTE.FACILITY.ENTITY.CENTER.v1",
        module=Module.WASTE_MANAGEMENT,
        icon="Recycle",
        primary_color="#038387",
        accent_color="#026b6e",
        description="Material recovery facilities and capacity",
        default_fields=("address", "capacity", "accepted_materials", "operator", "phone", "status"),
        kpi_metrics=("throughput", "utilization", "diversion_rate"),
        business_rules={"audit_trail"},
    ),
    # -- Finance -------------------------------------------------------------
    "GL_ACCOUNT": EntityPreset(
        title="GL Account",
        title_plural="GL Accounts",
        smart_code="HERA.FIN.GL.ENTITY.ACCOUNT.v1",
        module=Module.FINANCE,
        icon="BookOpen",
        primary_color="#004e8c",
        accent_color="#003966",
        description="Chart of accounts entries",
        default_fields=("account_number", "account_type", "normal_balance", "parent_account", "currency"),
        kpi_metrics=("total_accounts", "posting_accounts", "unmapped"),
        business_rules={"period_locking", "audit_trail"},
    ),
    "COST_CENTER": EntityPreset(
        title="Cost Center",
        title_plural="Cost Centers",
        smart_code="HERA.FIN.CO.ENTITY.COST_CENTER.v1",
        module=Module.FINANCE,
        icon="PieChart",
        primary_color="#8764b8",
        accent_color="#5a4476",
        description="Cost centers for management accounting",
        default_fields=("code", "manager", "budget", "department", "valid_from", "status"),
        kpi_metrics=("total_cost_centers", "budget_utilization", "variance"),
        business_rules={"audit_trail"},
    ),
    "EXPENSE_CLAIM": EntityPreset(
        title="Expense Claim",
        title_plural="Expense Claims",
        smart_code="HERA.FIN.AP.ENTITY.EXPENSE_CLAIM.v1",
        module=Module.FINANCE,
        icon="Receipt",
        primary_color="#ca5010",
        accent_color="#a4400d",
        description="Employee expense claims with receipts",
        default_fields=("employee", "amount", "currency", "expense_date", "category", "receipt_url", "status"),
        kpi_metrics=("claims_pending", "amount_mtd", "avg_reimbursement_days"),
        business_rules={"status_workflow", "requires_approval", "multi_currency", "audit_trail"},
    ),
    # -- HR ------------------------------------------------------------------
    "EMPLOYEE": EntityPreset(
        title="Employee",
        title_plural="Employees",
        smart_code="HERA.HR.CORE.ENTITY.EMPLOYEE.v1",
        module=Module.HR,
        icon="UserCheck",
        primary_color="#0078d4",
        accent_color="#005a9e",
        description="Employee master records",
        default_fields=("email", "phone", "department", "position", "hire_date", "manager", "salary"),
        kpi_metrics=("headcount", "new_hires", "attrition_rate"),
        business_rules={"gdpr_compliance", "audit_trail"},
    ),
    "LEAVE_REQUEST": EntityPreset(
        title="Leave Request",
        title_plural="Leave Requests",
        smart_code="HERA.HR.TIME.ENTITY.LEAVE_REQUEST.v1",
        module=Module.HR,
        icon="CalendarOff",
        primary_color="#038387",
        accent_color="#026b6e",
        description="Vacation and absence requests",
        default_fields=("employee", "leave_type", "start_date", "end_date", "days", "status"),
        kpi_metrics=("pending_requests", "days_taken", "by_type"),
        business_rules={"status_workflow", "requires_approval", "audit_trail"},
    ),
    # -- Salon ---------------------------------------------------------------
    "SERVICE": EntityPreset(
        title="Service",
        title_plural="Services",
        smart_code="HERA.SALON.CATALOG.ENTITY.SERVICE.v1",
        module=Module.SALON,
        icon="Scissors",
        primary_color="#c239b3",
        accent_color="#9a2d8e",
        description="Bookable salon services with duration and price",
        default_fields=("category", "price", "duration", "commission", "status"),
        kpi_metrics=("total_services", "avg_price", "top_sellers"),
        business_rules={"audit_trail"},
    ),
    "STYLIST": EntityPreset(
        title="Stylist",
        title_plural="Stylists",
        smart_code="HERA.SALON.STAFF.ENTITY.STYLIST.v1",
        module=Module.SALON,
        icon="Sparkles",
        primary_color="#e3008c",
        accent_color="#b4006f",
        description="Salon staff with skills and schedules",
        default_fields=("phone", "email", "branch", "skills", "commission_rate", "status"),
        kpi_metrics=("active_stylists", "utilization", "avg_rating"),
        business_rules={"audit_trail"},
    ),
    "APPOINTMENT": EntityPreset(
        title="Appointment",
        title_plural="Appointments",
        smart_code="HERA.SALON.BOOKING.ENTITY.APPOINTMENT.v1",
        module=Module.SALON,
        icon="CalendarClock",
        primary_color="#8764b8",
        accent_color="#5a4476",
        description="Customer bookings with stylist and service",
        default_fields=("customer", "stylist", "service", "start_date", "duration", "status"),
        kpi_metrics=("bookings_today", "no_show_rate", "revenue_booked"),
        business_rules={"status_workflow", "audit_trail"},
    ),
    # -- Jewelry -------------------------------------------------------------
    "JEWELRY_ITEM": EntityPreset(
        title="Jewelry Item",
        title_plural="Jewelry Items",
        smart_code="HERA.JEWELRY.INV.ENTITY.ITEM.v1",
        module=Module.JEWELRY,
        icon="Gem",
        primary_color="#ffb900",
        accent_color="#c79100",
        description="Jewelry pieces with purity and weight",
        default_fields=("sku", "price", "metal", "purity", "gross_weight", "stone_details", "status"),
        kpi_metrics=("pieces_in_stock", "stock_value", "gold_weight"),
        business_rules={"weight_verification", "duplicate_detection", "audit_trail"},
    ),
    "CERTIFICATE": EntityPreset(
        title="Certificate",
        title_plural="Certificates",
        smart_code="HERA.JEWELRY.QA.ENTITY.CERTIFICATE.v1",
        module=Module.JEWELRY,
        icon="Award",
        primary_color="#107c10",
        accent_color="#0b5a0b",
        description="Gemological and hallmark certificates",
        default_fields=("certificate_number", "issuer", "item", "issue_date", "grade", "document_url"),
        kpi_metrics=("certificates_issued", "pending_verification"),
        business_rules={"requires_verification", "audit_trail"},
    ),
    # -- Furniture -----------------------------------------------------------
    "WORK_ORDER": EntityPreset(
        title="Work Order",
        title_plural="Work Orders",
        smart_code="HERA.FURNITURE.MFG.ENTITY.WORK_ORDER.v1",
        module=Module.FURNITURE,
        icon="Hammer",
        primary_color="#8e562e",
        accent_color="#6b4122",
        description="Workshop production orders",
        default_fields=("product", "quantity", "craftsman", "start_date", "due_date", "priority", "status"),
        kpi_metrics=("open_orders", "on_time_rate", "wip_value"),
        business_rules={"status_workflow", "audit_trail"},
    ),
    "BOM_COMPONENT": EntityPreset(
        title="BOM Component",
        title_plural="BOM Components",
        smart_code="HERA.FURNITURE.MFG.ENTITY.BOM_COMPONENT.v1",
        module=Module.FURNITURE,
        icon="Layers",
        primary_color="#498205",
        accent_color="#3b6a04",
        description="Bill of materials lines",
        default_fields=("parent_product", "component", "quantity", "unit", "cost", "scrap_factor"),
        kpi_metrics=("total_components", "avg_cost_rollup"),
        business_rules={"version_control", "audit_trail"},
    ),
    # -- Audit ---------------------------------------------------------------
    "AUDIT_CLIENT": EntityPreset(
        title="Audit Client",
        title_plural="Audit Clients",
        smart_code="HERA.AUDIT.CLIENT.ENTITY.FIRM.v1",
        module=Module.AUDIT,
        icon="Briefcase",
        primary_color="#004e8c",
        accent_color="#003966",
        description="Audit engagement clients",
        default_fields=("company", "industry", "email", "phone", "risk_rating", "partner", "status"),
        kpi_metrics=("active_engagements", "high_risk_clients", "fee_budget"),
        business_rules={"requires_approval", "audit_trail"},
    ),
    "AUDIT_FINDING": EntityPreset(
        title="Audit Finding",
        title_plural="Audit Findings",
        smart_code="HERA.AUDIT.WORK.ENTITY.FINDING.v1",
        module=Module.AUDIT,
        icon="FileSearch",
        primary_color="#d13438",
        accent_color="#a4262c",
        description="Findings raised during fieldwork",
        default_fields=("client", "severity", "area", "owner", "due_date", "status"),
        kpi_metrics=("open_findings", "overdue", "by_severity"),
        business_rules={"status_workflow", "requires_evidence", "audit_trail"},
    ),
    # -- ISP -----------------------------------------------------------------
    "SUBSCRIBER": EntityPreset(
        title="Subscriber",
        title_plural="Subscribers",
        smart_code="HERA.ISP.CRM.ENTITY.SUBSCRIBER.v1",
        module=Module.ISP,
        icon="Wifi",
        primary_color="#0078d4",
        accent_color="#005a9e",
        description="Broadband subscribers and plans",
        default_fields=("email", "phone", "plan", "bandwidth", "monthly_fee", "start_date", "status"),
        kpi_metrics=("active_subscribers", "arpu", "churn_rate"),
        business_rules={"gdpr_compliance", "status_workflow", "audit_trail"},
    ),
    "NETWORK_NODE": EntityPreset(
        title="Network Node",
        title_plural="Network Nodes",
        smart_code="HERA.ISP.NET.ENTITY.NODE.v1",
        module=Module.ISP,
        icon="Server",
        primary_color="#038387",
        accent_color="#026b6e",
        description="Network equipment and uptime",
        default_fields=("location", "node_type", "ip_address", "uptime", "capacity", "status"),
        kpi_metrics=("nodes_online", "avg_uptime", "capacity_used"),
        business_rules={"real_time_tracking", "audit_trail"},
    ),
    # -- Retail --------------------------------------------------------------
    "STORE": EntityPreset(
        title="Store",
        title_plural="Stores",
        smart_code="HERA.RETAIL.NETWORK.ENTITY.STORE.v1",
        module=Module.RETAIL,
        icon="Store",
        primary_color="#ca5010",
        accent_color="#a4400d",
        description="Retail outlets and their managers",
        default_fields=("code", "address", "manager", "phone", "area", "opening_date", "status"),
        kpi_metrics=("total_stores", "sales_per_sqft", "footfall"),
        business_rules={"audit_trail"},
    ),
    "PROMOTION": EntityPreset(
        title="Promotion",
        title_plural="Promotions",
        smart_code="HERA.RETAIL.MERCH.ENTITY.PROMOTION.v1",
        module=Module.RETAIL,
        icon="Tag",
        primary_color="#e3008c",
        accent_color="#b4006f",
        description="Price promotions and campaigns in store",
        default_fields=("discount", "start_date", "end_date", "channel", "budget", "status"),
        kpi_metrics=("active_promotions", "uplift", "margin_impact"),
        business_rules={"status_workflow", "requires_approval", "audit_trail"},
    ),
    # -- Ice cream -----------------------------------------------------------
    "RECIPE": EntityPreset(
        title="Recipe",
        title_plural="Recipes",
        smart_code="HERA.ICECREAM.PROD.ENTITY.RECIPE.v1",
        module=Module.ICECREAM,
        icon="IceCream",
        primary_color="#ff8c00",
        accent_color="#cc7000",
        description="Ice cream recipes with batch yield",
        default_fields=("flavor", "batch_size", "yield", "cost", "shelf_life", "status"),
        kpi_metrics=("total_recipes", "avg_cost_per_litre"),
        business_rules={"version_control", "batch_tracking", "audit_trail"},
    ),
    "COLD_CHAIN_LOG": EntityPreset(
        title="Cold Chain Log",
        title_plural="Cold Chain Logs",
        smart_code="HERA.ICECREAM.QA.ENTITY.COLD_CHAIN.v1",
        module=Module.ICECREAM,
        icon="Thermometer",
        primary_color="#00bcf2",
        accent_color="#0078d4",
        description="Freezer temperature readings during distribution",
        default_fields=("vehicle", "batch", "temperature", "recorded_at", "location", "status"),
        kpi_metrics=("excursions", "compliance_rate"),
        business_rules={"real_time_tracking", "batch_tracking", "audit_trail"},
    ),
}
