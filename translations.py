from flask import current_app, session

LANGUAGES = ("ar", "en")
DEFAULT_LANGUAGE = "ar"
SESSION_LANG_KEY = "lang"

TEXTS = {
    # Brand / navbar
    "brandName": {"ar": "جمعية حماية المستهلك", "en": "CPA - Taiz"},
    "brand_tagline": {"ar": "تعز - اليمن", "en": "Taiz - Yemen"},
    "home": {"ar": "الرئيسية", "en": "Home"},
    "news": {"ar": "الأخبار", "en": "News"},
    "library": {"ar": "المكتبة", "en": "Gallery"},
    "prices": {"ar": "الأسعار", "en": "Prices"},
    "report": {"ar": "بلغ عن مخالفة", "en": "Report Violation"},
    "admin": {"ar": "لوحة التحكم", "en": "Admin Panel"},
    "careers": {"ar": "الوظائف", "en": "Careers"},
    "about": {"ar": "من نحن", "en": "About Us"},
    "language_switch": {"ar": "English", "en": "العربية"},
    "nav_logout": {"ar": "تسجيل الخروج", "en": "Logout"},

    # Hero slider
    "heroTitle1": {"ar": "معاً.. لسوق آمن ومستهلك محمي", "en": "Together for a Safe Market"},
    "heroSub1": {"ar": "الجمعية الأولى في تعز للدفاع عن حقوقك.",
                 "en": "The first association in Taiz defending your rights."},
    "heroTitle2": {"ar": "رقابة ميدانية مستمرة", "en": "Continuous Field Monitoring"},
    "heroSub2": {"ar": "فرقنا متواجدة في الأسواق لضمان الجودة.",
                 "en": "Our teams ensure quality and price stability."},
    "heroTitle3": {"ar": "اعرف حقوقك القانونية", "en": "Know Your Legal Rights"},
    "heroSub3": {"ar": "القانون اليمني يكفل لك الحق في الأمان والاختيار.",
                 "en": "Yemeni law guarantees your right to safety and choice."},
    "cta_report": {"ar": "قدّم بلاغاً الآن", "en": "Report Now"},
    "cta_prices": {"ar": "قائمة الأسعار", "en": "Price List"},

    # Services
    "services_title": {"ar": "خدماتنا ومهامنا", "en": "Our Services"},
    "srv_1_title": {"ar": "الرصد والرقابة", "en": "Monitoring"},
    "srv_1_desc": {"ar": "نراقب الأسواق ونرصد المخالفات.", "en": "We monitor markets and track violations."},
    "srv_2_title": {"ar": "الحماية القانونية", "en": "Legal Protection"},
    "srv_2_desc": {"ar": "نمثل صوتك أمام القضاء.", "en": "We represent you before the judiciary."},
    "srv_3_title": {"ar": "التوعية الشاملة", "en": "Awareness"},
    "srv_3_desc": {"ar": "اعرف حقوقك وكيف تحمي نفسك.", "en": "Know your rights and stay protected."},

    # News
    "news_title": {"ar": "أخبار وأنشطة الجمعية", "en": "News & Activities"},
    "news_school_title": {"ar": "ترحيب بقرار تخفيض الرسوم الدراسية", "en": "Welcoming School Fees Reduction"},
    "news_school_desc": {
        "ar": "رحبت الجمعية بقرار المحافظ رقم (137) بتحديد وتخفيض رسوم المدارس الأهلية، "
              "خطوة هامة لحماية حقوق أولياء الأمور.",
        "en": "CPA welcomes Governor Decree (137) to reduce private school fees, a major step "
              "for parents' rights.",
    },
    "news_campaign_title": {"ar": "حملة ميدانية لضبط الأسعار", "en": "Field Campaign for Price Control"},
    "news_campaign_desc": {
        "ar": "نزول سبع لجان ميدانية لضبط المخالفين بعد تحسن الصرف، بمساهمة لوجستية من الجمعية "
              "لضمان التزام التجار.",
        "en": "Seven field committees inspected markets to enforce prices after currency "
              "appreciation, with CPA logistical support.",
    },
    "news_food_title": {"ar": "تحذير بشأن الوجبات الجاهزة", "en": "Warning: Ready-made Meals"},
    "news_food_desc": {
        "ar": "تؤكد الجمعية على الحذر عند شراء المخبوزات والدواجن، والتأكد من الوزن والنظافة، "
              "وتدعو للإبلاغ عن المخالفات.",
        "en": "CPA urges caution when buying baked goods/poultry, checking weights/hygiene, "
              "and reporting violations.",
    },
    "no_news": {"ar": "لا توجد أخبار حالياً.", "en": "No news yet."},
    "read_more": {"ar": "اقرأ المزيد ←", "en": "Read More →"},

    # Gallery / library
    "gallery_title": {"ar": "مكتبة الصور", "en": "Photo Gallery"},
    "video_label": {"ar": "فيديو", "en": "Video"},
    "pubs_title": {"ar": "الإصدارات واللوائح", "en": "Publications & Regulations"},
    "pub_1_name": {"ar": "النظام الأساسي للجمعية", "en": "Association Bylaws"},
    "pub_2_name": {"ar": "قانون حماية المستهلك", "en": "Consumer Protection Law"},
    "pub_3_name": {"ar": "قائمة الأسعار", "en": "Price List"},

    # Legal guide
    "rights_title": {"ar": "دليلك القانوني", "en": "Your Legal Guide"},
    "q_return": {"ar": "هل يحق لي استرجاع السلعة؟", "en": "Can I return a product?"},
    "a_return": {"ar": "نعم، يحق لك استرجاع السلعة أو استبدالها خلال فترة الضمان إذا ظهر فيها عيب.",
                 "en": "Yes, you have the right to return or exchange within warranty if defective."},
    "q_price": {"ar": "وجدت سعراً أعلى من القائمة؟", "en": "Found a price higher than listed?"},
    "a_price": {"ar": "يجب على التاجر الالتزام بالقائمة السعرية، ويمكنك الإبلاغ عن أي زيادة.",
                "en": "Merchants must adhere to price lists; report any hike."},
    "q_invoice": {"ar": "أهمية فاتورة الشراء؟", "en": "Why is the invoice important?"},
    "a_invoice": {"ar": "الفاتورة هي ضمان حقك القانوني عند حدوث أي خلاف.",
                  "en": "The invoice is your legal guarantee in case of disputes."},
    "q_fraud": {"ar": "كيف أكتشف الغش التجاري؟", "en": "How to detect fraud?"},
    "a_fraud": {"ar": "تأكد من تاريخ الصلاحية، بلد المنشأ، وسلامة العبوة.",
                "en": "Check expiry date, origin, and packaging integrity."},

    # Transparency / partners / currency
    "transparency_title": {"ar": "لوحة الشفافية", "en": "Transparency Dashboard"},
    "stat_reports": {"ar": "بلاغ تم استلامه", "en": "Reports Received"},
    "stat_resolved": {"ar": "نسبة الحل", "en": "Resolution Rate"},
    "stat_inspections": {"ar": "نزول ميداني", "en": "Field Inspections"},
    "top_violations": {"ar": "السلع الأكثر مخالفة", "en": "Top Violations"},
    "partners_title": {"ar": "شركاء النجاح", "en": "Our Partners"},
    "currency_title": {"ar": "أسعار الصرف - تعز", "en": "Exchange Rates - Taiz"},
    "buy": {"ar": "شراء", "en": "Buy"},
    "sell": {"ar": "بيع", "en": "Sell"},

    # About
    "mission": {"ar": "رسالتنا", "en": "Mission"},
    "vision": {"ar": "رؤيتنا", "en": "Vision"},

    # Careers
    "join_team": {"ar": "انضم إلى فريقنا", "en": "Join Our Team"},
    "no_jobs": {"ar": "لا توجد وظائف شاغرة حالياً.", "en": "No open positions right now."},
    "deadline": {"ar": "آخر موعد", "en": "Deadline"},

    # Prices table
    "th_code": {"ar": "الرمز", "en": "Code"},
    "th_product": {"ar": "اسم المنتج", "en": "Product Name"},
    "th_price_yr": {"ar": "السعر (ريال)", "en": "Price (YR)"},
    "th_unit": {"ar": "الوحدة", "en": "Unit"},
    "th_category": {"ar": "الفئة", "en": "Category"},
    "th_last_updated": {"ar": "آخر تحديث", "en": "Last Updated"},

    # Footer
    "footer_about": {"ar": "عن الجمعية", "en": "About CPA"},
    "footer_desc": {"ar": "منظمة مدنية طوعية تعمل وفق قانون الجمعيات والمؤسسات الأهلية.",
                    "en": "Voluntary civil organization operating under the Law of Associations."},
    "footer_contact": {"ar": "تواصل معنا", "en": "Contact Us"},
    "registered_law": {"ar": "مسجلة وفق القانون رقم 46 لسنة 2008", "en": "Registered under Law No. 46 (2008)"},
    "partner_login": {"ar": "دخول بوابة الشركاء", "en": "Partner Portal Login"},
    "rights": {"ar": "© 2024 CPA-Ye. جميع الحقوق محفوظة.", "en": "© 2024 CPA-Ye. All Rights Reserved."},
    "tickerText": {"ar": "+++ عاجل: حملة ميدانية لمراقبة الأسعار +++ تأكد من الصلاحية +++",
                   "en": "+++ Urgent: Field campaign on prices +++ Check expiry dates +++"},

    # Report form
    "product_name": {"ar": "اسم المنتج", "en": "Product Name"},
    "select_product": {"ar": "اختر المنتج", "en": "Select Product"},
    "price": {"ar": "السعر", "en": "Price"},
    "observed_price": {"ar": "السعر الذي وجدته", "en": "Price Found"},
    "official_price": {"ar": "السعر الرسمي", "en": "Official Price"},
    "violation_alert": {"ar": "تنبيه: زيادة سعرية بمقدار", "en": "Alert: Price hike of"},
    "shop_name": {"ar": "اسم المحل", "en": "Shop Name"},
    "location": {"ar": "الموقع", "en": "Location"},
    "loc_success": {"ar": "تم تحديد الموقع بنجاح", "en": "Location Set Successfully"},
    "details": {"ar": "تفاصيل البلاغ", "en": "Report Details"},
    "submit": {"ar": "إرسال البلاغ", "en": "Submit Report"},
    "submit_again": {"ar": "إرسال بلاغ آخر", "en": "Submit Another Report"},
    "report_title": {"ar": "الإبلاغ عن مخالفة", "en": "Report a Violation"},
    "applyNow": {"ar": "قدّم الآن", "en": "Apply Now"},
    "analyzing": {"ar": "جاري التحليل بالذكاء الاصطناعي...", "en": "Analyzing with AI..."},
    "successMsg": {"ar": "تم إرسال البلاغ بنجاح!", "en": "Report Submitted Successfully!"},
    "aiFeedback": {"ar": "تحليل المساعد الذكي:", "en": "AI Assistant Analysis:"},

    # Auth
    "login": {"ar": "تسجيل الدخول", "en": "Login"},
    "username": {"ar": "اسم المستخدم", "en": "Username"},
    "password": {"ar": "كلمة المرور", "en": "Password"},
    "restricted_access": {"ar": "دخول مقيد. للمخولين فقط.",
                          "en": "Restricted Access. Authorized Personnel Only."},
    "flash_invalid_credentials": {"ar": "بيانات الدخول غير صحيحة", "en": "Invalid credentials"},
    "flash_logged_out": {"ar": "تم تسجيل الخروج.", "en": "You have been logged out."},
    "flash_login_required": {"ar": "يرجى تسجيل الدخول للوصول إلى هذه الصفحة.",
                             "en": "Please log in to access this page."},

    # Admin shell
    "dashboard": {"ar": "لوحة التحكم", "en": "Dashboard"},
    "settings": {"ar": "الإعدادات", "en": "Settings"},
    "users": {"ar": "المستخدمين", "en": "Users"},
    "content": {"ar": "إدارة المحتوى", "en": "Content Mgmt"},
    "admin_brand": {"ar": "إدارة الجمعية", "en": "CPA Admin"},
    "welcome_user": {"ar": "مرحباً، {name}", "en": "Welcome, {name}"},
    "view_site": {"ar": "عرض الموقع", "en": "View Site"},
    "tab_dashboard": {"ar": "لوحة التحكم", "en": "Dashboard"},
    "tab_users": {"ar": "المستخدمين", "en": "Users"},
    "tab_content": {"ar": "محتوى الأخبار", "en": "News Content"},
    "tab_products": {"ar": "المنتجات والأسعار", "en": "Products & Prices"},
    "tab_reports": {"ar": "خريطة البلاغات", "en": "Reports Map"},
    "tab_hr": {"ar": "الموارد البشرية", "en": "HR Management"},
    "tab_crm": {"ar": "علاقات المانحين", "en": "Donor Relations"},
    "tab_settings": {"ar": "الإعدادات", "en": "Settings"},
    "btn_delete": {"ar": "حذف", "en": "Delete"},
    "th_actions": {"ar": "إجراءات", "en": "Actions"},

    # Admin: dashboard
    "dashboard_overview": {"ar": "نظرة عامة", "en": "Dashboard Overview"},
    "total_reports": {"ar": "إجمالي البلاغات", "en": "Total Reports"},
    "products_count": {"ar": "المنتجات", "en": "Products"},
    "active_jobs": {"ar": "الوظائف النشطة", "en": "Active Jobs"},
    "donations_ytd": {"ar": "التبرعات (هذا العام)", "en": "Donations (YTD)"},

    # Admin: users
    "user_management": {"ar": "إدارة المستخدمين", "en": "User Management"},
    "add_user": {"ar": "إضافة مستخدم", "en": "Add User"},
    "full_name": {"ar": "الاسم الكامل", "en": "Full Name"},
    "role": {"ar": "الدور", "en": "Role"},
    "role_admin": {"ar": "مدير", "en": "Admin"},
    "role_staff": {"ar": "موظف", "en": "Staff"},
    "role_donor": {"ar": "مانح", "en": "Donor"},
    "flash_user_created": {"ar": "تمت إضافة المستخدم {username}.", "en": "User {username} created."},
    "flash_user_deleted": {"ar": "تم حذف المستخدم.", "en": "User deleted."},
    "flash_user_protected": {"ar": "لا يمكن حذف حساب المدير.", "en": "The admin account cannot be deleted."},
    "username_taken": {"ar": "اسم المستخدم مستخدم مسبقاً.", "en": "Username already taken."},

    # Admin: news
    "news_content": {"ar": "محتوى الأخبار", "en": "News Content"},
    "post_news": {"ar": "نشر خبر جديد", "en": "Post News Update"},
    "title_ar": {"ar": "العنوان (عربي)", "en": "Title (Arabic)"},
    "title_en": {"ar": "العنوان (إنجليزي)", "en": "Title (English)"},
    "desc_ar": {"ar": "الوصف (عربي)", "en": "Description (Arabic)"},
    "desc_en": {"ar": "الوصف (إنجليزي)", "en": "Description (English)"},
    "publish_news": {"ar": "نشر الخبر", "en": "Publish News"},
    "flash_news_published": {"ar": "تم نشر الخبر.", "en": "News published."},
    "flash_news_deleted": {"ar": "تم حذف الخبر.", "en": "News item deleted."},

    # Admin: products
    "product_management": {"ar": "إدارة أسعار المنتجات", "en": "Product Price Management"},
    "add_product": {"ar": "إضافة منتج", "en": "Add Product"},
    "name_ar": {"ar": "الاسم (عربي)", "en": "Name (AR)"},
    "name_en": {"ar": "الاسم (إنجليزي)", "en": "Name (EN)"},
    "flash_product_created": {"ar": "تمت إضافة المنتج {code}.", "en": "Product {code} added."},
    "flash_product_deleted": {"ar": "تم حذف المنتج.", "en": "Product deleted."},

    # Admin: HR
    "hr_management": {"ar": "إدارة الموارد البشرية", "en": "HR Management"},
    "post_job": {"ar": "نشر وظيفة", "en": "Post New Job"},
    "job_type": {"ar": "نوع الوظيفة", "en": "Type"},
    "flash_job_posted": {"ar": "تم نشر الوظيفة.", "en": "Job posted."},
    "flash_job_deleted": {"ar": "تم حذف الوظيفة.", "en": "Job deleted."},

    # Admin: reports
    "reports_map": {"ar": "خريطة البلاغات التفاعلية", "en": "Interactive Reports Map"},
    "live_violations": {"ar": "المخالفات المباشرة", "en": "Live Violations"},
    "price_violation": {"ar": "مخالفة سعرية", "en": "Price Violation"},
    "no_reports": {"ar": "لا توجد بلاغات بعد.", "en": "No reports yet."},
    "th_reported_price": {"ar": "السعر المبلغ عنه", "en": "Reported Price"},
    "th_status": {"ar": "الحالة", "en": "Status"},
    "th_date": {"ar": "التاريخ", "en": "Date"},
    "no_location": {"ar": "بدون موقع", "en": "No location"},
    "status_pending": {"ar": "قيد الانتظار", "en": "Pending"},
    "status_reviewed": {"ar": "تمت المراجعة", "en": "Reviewed"},
    "status_resolved": {"ar": "تم الحل", "en": "Resolved"},

    # Admin: CRM
    "donor_relations": {"ar": "علاقات المانحين", "en": "Donor Relations"},
    "active_donors": {"ar": "المانحون النشطون", "en": "Active Donors"},
    "projects": {"ar": "المشاريع", "en": "Projects"},
    "total_funds": {"ar": "إجمالي الأموال (ريال)", "en": "Total Funds (YR)"},
    "crm_sync_status": {"ar": "حالة مزامنة CiviCRM", "en": "CiviCRM Sync Status"},
    "last_synchronized": {"ar": "آخر مزامنة: {when}", "en": "Last synchronized: {when}"},

    # Admin: settings
    "organization_profile": {"ar": "ملف الجمعية", "en": "Organization Profile"},
    "mission_ar": {"ar": "الرسالة (عربي)", "en": "Mission (AR)"},
    "mission_en": {"ar": "الرسالة (إنجليزي)", "en": "Mission (EN)"},
    "vision_ar": {"ar": "الرؤية (عربي)", "en": "Vision (AR)"},
    "vision_en": {"ar": "الرؤية (إنجليزي)", "en": "Vision (EN)"},
    "about_ar": {"ar": "نبذة (عربي)", "en": "About (AR)"},
    "about_en": {"ar": "نبذة (إنجليزي)", "en": "About (EN)"},
    "phone": {"ar": "الهاتف", "en": "Phone"},
    "email": {"ar": "البريد الإلكتروني", "en": "Email"},
    "address_ar": {"ar": "العنوان (عربي)", "en": "Address (AR)"},
    "address_en": {"ar": "العنوان (إنجليزي)", "en": "Address (EN)"},
    "save_changes": {"ar": "حفظ التغييرات", "en": "Save Changes"},
    "flash_profile_updated": {"ar": "تم تحديث ملف الجمعية.", "en": "Organization profile updated."},
    "flash_form_invalid": {"ar": "يرجى تصحيح الحقول المطلوبة.", "en": "Please correct the highlighted fields."},

    # Errors
    "error_403_title": {"ar": "غير مسموح", "en": "Access Denied"},
    "error_403_msg": {"ar": "ليس لديك صلاحية لعرض هذه الصفحة.",
                      "en": "You do not have permission to view this page."},
    "error_404_title": {"ar": "الصفحة غير موجودة", "en": "Page Not Found"},
    "error_404_msg": {"ar": "الصفحة التي تبحث عنها غير موجودة.",
                      "en": "The page you are looking for does not exist."},
    "error_500_title": {"ar": "خطأ في الخادم", "en": "Server Error"},
    "error_500_msg": {"ar": "حدث خطأ غير متوقع. حاول مرة أخرى لاحقاً.",
                      "en": "Something went wrong. Please try again later."},
    "back_home": {"ar": "العودة للرئيسية", "en": "Back to Home"},
}


def translate(key, lang):
    """Resolve ``key`` in ``lang``; unknown keys and missing variants yield the key."""
    entry = TEXTS.get(key)
    if not entry:
        return key
    return entry.get(lang) or key


def get_translator(lang=DEFAULT_LANGUAGE):
    """Return a translation function for the given language."""

    def t(key, **kwargs):
        text = translate(key, lang)
        if kwargs:
            text = text.format(**kwargs)
        return text

    return t


def text_direction(lang):
    return "rtl" if lang == "ar" else "ltr"


def get_language():
    default = current_app.config.get("DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)
    lang = session.get(SESSION_LANG_KEY, default)
    return lang if lang in LANGUAGES else default


def set_language(lang):
    if lang in LANGUAGES:
        session[SESSION_LANG_KEY] = lang
    return get_language()


def toggle_language():
    return set_language("en" if get_language() == "ar" else "ar")
