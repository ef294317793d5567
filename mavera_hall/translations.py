"""Arabic and English UI strings, addressed with dot paths (``nav.home``)."""

TRANSLATIONS = {
    "en": {
        "meta": {
            "brand": "Mavera Hall",
            "title": "Mavera Hall - Where Dreams Come True",
            "description": "Discover the most elegant and luxurious event hall in the city. "
                           "Spacious areas, modern design, and exceptional service.",
        },
        "nav": {
            "home": "Home",
            "about": "About",
            "services": "Services",
            "gallery": "Gallery",
            "hall_details": "Hall Details",
            "faqs": "FAQs",
            "contact": "Contact",
            "book_now": "Book Now",
            "login": "Login",
            "logout": "Sign out",
            "staff": "Dashboard",
            "language": "Language",
        },
        "hero": {
            "title": "Where Dreams Come True and Memories Are Made",
            "subtitle": "Discover the most elegant and luxurious event hall in the city. Spacious areas, "
                        "modern design, and exceptional service to make your event unforgettable.",
            "cta_book": "Book Now",
            "cta_explore": "Explore the Hall",
        },
        "home": {
            "announcements": "Latest News",
            "all_services": "See all services",
        },
        "about": {
            "title": "About Mavera Hall",
            "intro": "Located in the heart of elegance, Mavera Hall stands as a testament to timeless beauty "
                     "and sophisticated design. Our hall has been the backdrop for countless magical moments, "
                     "from intimate gatherings to grand celebrations.",
            "mission_title": "Our Mission",
            "mission": "To make every event extraordinary, from the first consultation to the final farewell.",
            "vision_title": "Our Vision",
            "vision": "To be the first choice for weddings, conferences and celebrations in the region.",
        },
        "services": {
            "title": "Our Services",
            "subtitle": "We provide a comprehensive range of services to meet all your event needs, "
                        "from planning to execution.",
            "items": {
                "weddings": {
                    "title": "Weddings",
                    "description": "Unique wedding celebrations with every perfect detail.",
                },
                "corporate": {
                    "title": "Corporate Events",
                    "description": "Professional events for institutions and companies.",
                },
                "private": {
                    "title": "Private Parties",
                    "description": "Unforgettable private celebrations with friends and family.",
                },
                "cultural": {
                    "title": "Seminars & Conferences",
                    "description": "Educational and professional events in a professional environment.",
                },
                "graduation": {
                    "title": "Graduations",
                    "description": "Celebrate achievements with family, friends and classmates.",
                },
                "exhibitions": {
                    "title": "Exhibitions",
                    "description": "Flexible floor space for product launches and exhibitions.",
                },
            },
        },
        "testimonials": {
            "title": "Customer Testimonials",
            "items": {
                "wedding": {
                    "quote": "Our wedding at Mavera Hall was an unforgettable experience. The team was very "
                             "professional and every detail was perfect.",
                    "author": "Ahmed Mohamed, Groom",
                },
                "conference": {
                    "quote": "We organized our annual conference at Mavera Hall and the result was amazing.",
                    "author": "Fatima Ali, Company Director",
                },
                "graduation": {
                    "quote": "Mavera Hall is the best choice for important events. The quality and service "
                             "are unmatched.",
                    "author": "Mohamed Hassan, Event Organizer",
                },
            },
        },
        "gallery": {
            "title": "Photo Gallery",
            "all": "All",
            "empty": "No images available at the moment.",
            "categories": {
                "events": "Events",
                "hall": "The Hall",
                "decor": "Decor",
                "catering": "Catering",
            },
        },
        "hall": {
            "title": "Hall Details",
            "description": "A luxurious and modern event hall.",
            "amenities": "Amenities",
            "capacity": "Capacity",
            "guests_range": "{min} to {max} guests",
            "policies": "Booking policies",
            "policy_notice": "Bookings open {min} to {max} days before the event.",
            "policy_deposit": "A {pct}% deposit confirms the booking.",
            "policy_cancellation": "Cancellations within {days} days of the event incur a {pct}% fee.",
        },
        "faqs": {
            "title": "Frequently Asked Questions",
            "empty": "No questions published yet.",
            "more": "Still have a question?",
        },
        "contact": {
            "title": "Contact Us",
            "subtitle": "We are here to help you plan your perfect event. Contact us today!",
            "address": "Address",
            "phone": "Phone",
            "email": "Email",
            "hours": "Sunday - Thursday: 8:00 AM - 10:00 PM",
            "success": "Your message has been sent successfully! We will contact you soon.",
            "form": {
                "name": "Full Name",
                "email": "Email Address",
                "phone": "Phone Number (optional)",
                "subject": "Subject",
                "message": "Your Message",
                "submit": "Send Message",
            },
        },
        "booking": {
            "title": "Book Mavera Hall",
            "availability": "Availability",
            "rules": "{min} to {max} guests, at least {notice} days in advance.",
            "no_overlap": "* Overlapping bookings are not allowed.",
            "form": {
                "name": "Full Name",
                "email": "Email Address",
                "phone": "Phone Number (optional)",
                "event_type": "Event Type",
                "choose": "Choose...",
                "event_date": "Event Date",
                "start_time": "Start Time",
                "end_time": "End Time",
                "guest_count": "Number of Guests",
                "special_requests": "Special Requests",
                "submit": "Send Booking Request",
            },
            "event_types": {
                "wedding": "Wedding",
                "engagement": "Engagement",
                "birthday": "Birthday",
                "corporate": "Corporate Event",
                "graduation": "Graduation",
                "anniversary": "Anniversary",
                "conference": "Conference",
                "other": "Other",
            },
            "confirmation": {
                "title": "Booking Request Received",
                "received": "Thank you! Your booking request has been received.",
                "reference": "Reference",
                "time": "Time",
                "deposit": "Deposit due",
                "next_steps": "Our team will contact you within 24 hours to confirm the details.",
            },
            "lookup": {
                "title": "Find My Booking",
                "intro": "Enter the reference from your confirmation and the email you booked with.",
                "reference": "Booking reference",
                "email": "Email",
                "submit": "Find booking",
                "not_found": "No booking matches that reference and email.",
                "cancellation_fee": "Cancellation fee",
            },
        },
        "login": {
            "title": "Staff Sign In",
            "subtitle": "Sign in to manage bookings and the hall.",
            "email": "Email",
            "password": "Password",
            "submit": "Sign In",
            "demo_hint": "Demo: admin@mavera.com / admin123",
        },
        "footer": {
            "privacy": "Privacy Policy",
            "terms": "Terms of Service",
            "my_booking": "Find my booking",
            "rights": "All rights reserved.",
        },
        "legal": {
            "privacy": {
                "title": "Privacy Policy",
                "body": "We use your contact details only to handle your booking and enquiries. "
                        "We never sell or share your information with third parties.",
            },
            "terms": {
                "title": "Terms of Service",
                "body": "Bookings are confirmed once the deposit is received. Late cancellations incur a fee "
                        "as described on the hall details page.",
            },
        },
        "calendar": {
            "months": [
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December",
            ],
            "weekdays": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
            "weekdays_short": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
            "prev_month": "< Previous",
            "next_month": "Next >",
            "availability": {
                "available": "Available",
                "booked": "Booked",
                "unavailable": "Unavailable",
                "maintenance": "Maintenance",
            },
        },
        "status": {
            "pending": "Pending",
            "confirmed": "Confirmed",
            "cancelled": "Cancelled",
            "completed": "Completed",
            "scheduled": "Scheduled",
            "in-progress": "In Progress",
            "open": "Open",
            "in_progress": "In Progress",
            "resolved": "Resolved",
            "closed": "Closed",
            "active": "Active",
            "inactive": "Inactive",
            "published": "Published",
            "draft": "Draft",
        },
        "priority": {
            "high": "High",
            "medium": "Medium",
            "normal": "Normal",
            "low": "Low",
        },
        "announcement_types": {
            "general": "General",
            "maintenance": "Maintenance",
            "service": "Service",
            "promotion": "Promotion",
        },
        "errors": {
            "validation": {
                "required": "This field is required",
                "invalid_email": "Please enter a valid email address",
                "invalid_phone": "Please enter a valid phone number",
                "password_too_weak": "Password must be at least 8 characters with upper and lower case "
                                     "letters, a number and a symbol",
                "password_mismatch": "Passwords do not match",
                "too_short": "This value is too short",
                "invalid_date": "Please enter a valid date",
                "invalid_time": "Please enter a valid time",
                "invalid_number": "Please enter a valid number",
            },
            "booking": {
                "invalid": "Please correct the highlighted fields.",
                "guest_count": "The number of guests is outside the hall's limits",
                "past_date": "The event date is in the past",
                "advance_required": "Bookings must be made further in advance",
                "advance_too_far": "Bookings cannot be made that far in advance",
                "end_before_start": "The end time must be after the start time",
                "too_long": "The booking is longer than the maximum allowed duration",
                "conflict": "The requested time overlaps an existing booking: {title}",
                "date_unavailable": "The hall is not available on this date",
                "invalid_transition": "This status change is not allowed",
            },
            "page": {
                "not_found_title": "Page not found",
                "not_found": "The page you are looking for does not exist.",
                "forbidden_title": "Access denied",
                "forbidden": "Please sign in to continue.",
                "server_title": "Something went wrong",
                "server": "An unexpected error occurred. Please try again later.",
                "generic_title": "Request failed",
                "back_home": "Back to home",
            },
        },
        "flash": {
            "saved": "Saved.",
            "deleted": "Deleted.",
            "missing_fields": "Please fill in all required fields.",
            "invalid_status": "Unknown status.",
            "invalid_range": "Please choose a valid date or date range.",
            "invalid_settings": "Please check the highlighted settings.",
            "duplicate_email": "This email address is already registered.",
            "reply_sent": "Reply sent.",
            "booking_created": "Booking {reference} created.",
            "booking_status": "Booking {reference} is now {status}.",
            "booking_cancelled": "Booking {reference} cancelled.",
            "booking_cancelled_fee": "Booking {reference} cancelled with a late fee of {fee}.",
            "booking_deleted": "Booking {reference} deleted.",
            "task_status": "Task \"{title}\" is now {status}.",
            "days_blocked": "{count} day(s) blocked.",
            "days_skipped_booked": "{count} day(s) skipped because they already have bookings.",
            "days_unblocked": "{count} day(s) reopened.",
        },
        "staff": {
            "console": "Staff Console",
            "empty": "Nothing here yet.",
            "save": "Save",
            "cancel": "Cancel",
            "edit": "Edit",
            "delete": "Delete",
            "update": "Update",
            "filter": "Filter",
            "publish": "Publish",
            "unpublish": "Unpublish",
            "actions": "Actions",
            "all_statuses": "All",
            "confirm_delete": "Are you sure you want to delete this?",
            "nav": {
                "dashboard": "Dashboard",
                "bookings": "Bookings",
                "booking_calendar": "Booking Calendar",
                "calendar": "Calendar",
                "availability": "Availability",
                "tasks": "Tasks",
                "customers": "Customers",
                "support": "Support",
                "notifications": "Notifications",
                "announcements": "Announcements",
                "faqs": "FAQs",
                "gallery": "Gallery",
                "pages": "Pages",
                "reports": "Reports",
                "analytics": "Analytics",
                "users": "Staff",
                "logs": "Activity Log",
                "hall": "Hall Info",
                "settings": "Booking Rules",
                "profile": "Profile",
            },
            "fields": {
                "reference": "Reference",
                "title": "Title",
                "name": "Name",
                "email": "Email",
                "customer": "Customer",
                "event_type": "Event Type",
                "date": "Date",
                "guests": "Guests",
                "amount": "Amount",
                "status": "Status",
                "type": "Type",
                "priority": "Priority",
                "category": "Category",
                "description": "Description",
                "content": "Content",
                "due": "Due",
                "assigned_to": "Assigned to",
                "notes": "Notes",
                "reason": "Reason",
                "from": "From",
                "to": "To",
                "publish_date": "Publish date",
                "source": "Source",
                "cancellation_fee": "Cancellation fee",
            },
            "dashboard": {
                "title": "Dashboard",
                "todays_events": "Today's events",
                "active_bookings": "Active bookings",
                "pending_bookings": "Awaiting confirmation",
                "week_bookings": "Next 7 days",
                "pending_tasks": "Open tasks",
                "overdue_tasks": "Overdue tasks",
                "open_tickets": "Open tickets",
                "unread_notifications": "Unread notifications",
                "upcoming": "Upcoming bookings",
                "recent_activity": "Recent activity",
            },
            "bookings": {
                "new": "New booking",
                "search": "Name, email or reference",
                "cancel_booking": "Cancel booking",
                "confirm_cancel": "Cancel this booking? A late fee may apply.",
            },
            "calendar": {
                "new_event": "New event",
                "events": "Events this month",
                "types": {
                    "maintenance": "Maintenance",
                    "meeting": "Meeting",
                    "other": "Other",
                },
            },
            "availability": {
                "block": "Block",
                "unblock": "Reopen",
                "block_range": "Block a date range",
                "unblock_range": "Reopen a date range",
                "booked_note": "Days that already have bookings cannot be blocked.",
            },
            "tasks": {
                "new": "New task",
                "overdue": "Overdue",
                "categories": {
                    "booking": "Booking",
                    "operations": "Operations",
                    "support": "Support",
                    "content": "Content",
                },
            },
            "customers": {
                "new": "New customer",
                "search": "Name, email or phone",
                "total_bookings": "Bookings",
                "total_spent": "Total spent",
                "last_booking": "Last booking",
                "preferences": "Preferences (comma separated)",
                "history": "Booking history",
            },
            "announcements": {"new": "New announcement"},
            "faqs": {
                "new": "New question",
                "question": "Question",
                "answer": "Answer",
                "views": "Views",
            },
            "gallery": {
                "new": "Add image",
                "url": "Image URL",
                "featured": "Featured",
                "toggle_feature": "Toggle featured",
            },
            "pages": {
                "slug": "Path",
                "create": "Create",
                "default_content": "Using default content",
                "meta_description": "Meta description",
            },
            "support": {
                "subject": "Subject",
                "replies": "Replies",
                "reply": "Reply",
                "send": "Send reply",
                "assign": "Assign",
            },
            "notifications": {
                "mark_read": "Mark as read",
                "mark_all": "Mark all as read",
            },
            "users": {
                "new": "New staff member",
                "role": "Role",
                "department": "Department",
                "last_login": "Last login",
                "activate": "Activate",
                "deactivate": "Deactivate",
            },
            "logs": {
                "time": "Time",
                "user": "User",
                "action": "Action",
                "severity": {
                    "info": "Info",
                    "warning": "Warning",
                    "error": "Error",
                },
            },
            "reports": {
                "export": "Export CSV",
                "total": "Bookings",
                "revenue": "Revenue",
                "average": "Average booking",
                "guests": "Guests",
                "cancellation_fees": "Cancellation fees",
                "by_status": "By status",
                "by_event_type": "By event type",
            },
            "analytics": {
                "month": "Month",
                "growth": "Revenue growth",
                "months": "{count} months",
            },
            "hall": {"amenities_help": "Amenities (one per line)"},
            "settings": {
                "help": "These rules apply to new booking requests.",
                "min_guests": "Minimum guests",
                "max_guests": "Maximum guests",
                "min_notice_days": "Minimum notice (days)",
                "max_advance_days": "Maximum advance (days)",
                "cancellation_deadline_days": "Cancellation deadline (days)",
                "deposit_percentage": "Deposit (fraction, e.g. 0.30)",
                "late_cancellation_fee_percentage": "Late cancellation fee (fraction, e.g. 0.10)",
            },
            "profile": {
                "language": "Interface language",
                "demo_account": "Demo administrator",
            },
        },
    },
    "ar": {
        "meta": {
            "brand": "قاعة مافيرا",
            "title": "قاعة مافيرا - حيث تتحقق الأحلام",
            "description": "اكتشف قاعة الأحداث الأكثر أناقة وفخامة في المدينة. مساحات واسعة، تصميم عصري، "
                           "وخدمة استثنائية.",
        },
        "nav": {
            "home": "الرئيسية",
            "about": "من نحن",
            "services": "الخدمات",
            "gallery": "المعرض",
            "hall_details": "تفاصيل القاعة",
            "faqs": "الأسئلة الشائعة",
            "contact": "اتصل بنا",
            "book_now": "احجز الآن",
            "login": "تسجيل الدخول",
            "logout": "تسجيل الخروج",
            "staff": "لوحة التحكم",
            "language": "اللغة",
        },
        "hero": {
            "title": "حيث تتحقق الأحلام وتُصنع الذكريات",
            "subtitle": "اكتشف قاعة الأحداث الأكثر أناقة وفخامة في المدينة. مساحات واسعة، تصميم عصري، "
                        "وخدمة استثنائية لجعل مناسبتك لا تُنسى.",
            "cta_book": "احجز الآن",
            "cta_explore": "استكشف القاعة",
        },
        "home": {
            "announcements": "آخر الأخبار",
            "all_services": "عرض جميع الخدمات",
        },
        "about": {
            "title": "عن قاعة مافيرا",
            "intro": "تقع قاعة مافيرا في قلب الأناقة، وتقف كشاهد على الجمال الخالد والتصميم المتطور. "
                     "كانت قاعتنا خلفية لعدد لا يحصى من اللحظات السحرية، من التجمعات الحميمة إلى "
                     "الاحتفالات الكبرى.",
            "mission_title": "رسالتنا",
            "mission": "أن نجعل كل مناسبة استثنائية، من الاستشارة الأولى إلى الوداع الأخير.",
            "vision_title": "رؤيتنا",
            "vision": "أن نكون الخيار الأول لحفلات الزفاف والمؤتمرات والاحتفالات في المنطقة.",
        },
        "services": {
            "title": "خدماتنا",
            "subtitle": "نقدم مجموعة شاملة من الخدمات لتلبية جميع احتياجات مناسبتك، من التخطيط إلى التنفيذ.",
            "items": {
                "weddings": {
                    "title": "حفلات الزفاف",
                    "description": "حفلات زفاف فريدة من نوعها مع كل التفاصيل المثالية.",
                },
                "corporate": {
                    "title": "الفعاليات المؤسسية",
                    "description": "فعاليات احترافية للمؤسسات والشركات.",
                },
                "private": {
                    "title": "الحفلات الخاصة",
                    "description": "احتفالات خاصة لا تُنسى مع أصدقائك وعائلتك.",
                },
                "cultural": {
                    "title": "الندوات والمؤتمرات",
                    "description": "فعاليات تعليمية ومهنية في بيئة احترافية.",
                },
                "graduation": {
                    "title": "حفلات التخرج",
                    "description": "احتفل بالإنجاز مع العائلة والأصدقاء والزملاء.",
                },
                "exhibitions": {
                    "title": "المعارض",
                    "description": "مساحة مرنة لإطلاق المنتجات والمعارض.",
                },
            },
        },
        "testimonials": {
            "title": "آراء العملاء",
            "items": {
                "wedding": {
                    "quote": "كانت حفلتنا في قاعة مافيرا تجربة لا تُنسى. الفريق كان محترفاً جداً وكل "
                             "التفاصيل كانت مثالية.",
                    "author": "أحمد محمد، عريس",
                },
                "conference": {
                    "quote": "نظمنا مؤتمرنا السنوي في قاعة مافيرا وكانت النتيجة مذهلة.",
                    "author": "فاطمة علي، مديرة شركة",
                },
                "graduation": {
                    "quote": "قاعة مافيرا هي الخيار الأفضل للفعاليات المهمة. الجودة والخدمة لا مثيل لهما.",
                    "author": "محمد حسن، منظم فعاليات",
                },
            },
        },
        "gallery": {
            "title": "معرض الصور",
            "all": "الكل",
            "empty": "لا توجد صور متاحة حالياً.",
            "categories": {
                "events": "المناسبات",
                "hall": "القاعة",
                "decor": "الديكور",
                "catering": "الضيافة",
            },
        },
        "hall": {
            "title": "تفاصيل القاعة",
            "description": "قاعة مناسبات فاخرة وعصرية.",
            "amenities": "المرافق",
            "capacity": "السعة",
            "guests_range": "من {min} إلى {max} ضيف",
            "policies": "سياسات الحجز",
            "policy_notice": "يُفتح الحجز قبل المناسبة بمدة من {min} إلى {max} يوماً.",
            "policy_deposit": "يتم تأكيد الحجز بدفع عربون بنسبة {pct}%.",
            "policy_cancellation": "الإلغاء خلال {days} يوماً من المناسبة يترتب عليه رسوم بنسبة {pct}%.",
        },
        "faqs": {
            "title": "الأسئلة الشائعة",
            "empty": "لا توجد أسئلة منشورة بعد.",
            "more": "هل لديك سؤال آخر؟",
        },
        "contact": {
            "title": "اتصل بنا",
            "subtitle": "نحن هنا لمساعدتك في تخطيط مناسبتك المثالية. اتصل بنا اليوم!",
            "address": "العنوان",
            "phone": "الهاتف",
            "email": "البريد الإلكتروني",
            "hours": "الأحد - الخميس: 8:00 ص - 10:00 م",
            "success": "تم إرسال رسالتك بنجاح! سنتواصل معك قريباً.",
            "form": {
                "name": "الاسم الكامل",
                "email": "البريد الإلكتروني",
                "phone": "رقم الهاتف (اختياري)",
                "subject": "الموضوع",
                "message": "رسالتك",
                "submit": "إرسال الرسالة",
            },
        },
        "booking": {
            "title": "احجز قاعة مافيرا",
            "availability": "التواريخ المتاحة",
            "rules": "من {min} إلى {max} ضيف، وقبل {notice} يوماً على الأقل.",
            "no_overlap": "* لا يُسمح بتداخل المواعيد.",
            "form": {
                "name": "الاسم الكامل",
                "email": "البريد الإلكتروني",
                "phone": "رقم الهاتف (اختياري)",
                "event_type": "نوع المناسبة",
                "choose": "اختر...",
                "event_date": "تاريخ المناسبة",
                "start_time": "وقت البداية",
                "end_time": "وقت النهاية",
                "guest_count": "عدد الضيوف",
                "special_requests": "طلبات خاصة",
                "submit": "إرسال طلب الحجز",
            },
            "event_types": {
                "wedding": "حفل زفاف",
                "engagement": "حفل خطوبة",
                "birthday": "عيد ميلاد",
                "corporate": "فعالية مؤسسية",
                "graduation": "حفل تخرج",
                "anniversary": "ذكرى سنوية",
                "conference": "مؤتمر",
                "other": "أخرى",
            },
            "confirmation": {
                "title": "تم استلام طلب الحجز",
                "received": "شكراً لك! تم استلام طلب الحجز الخاص بك.",
                "reference": "رقم المرجع",
                "time": "الوقت",
                "deposit": "العربون المستحق",
                "next_steps": "سيتواصل معك فريقنا خلال 24 ساعة لتأكيد التفاصيل.",
            },
            "lookup": {
                "title": "استعلام عن حجزي",
                "intro": "أدخل رقم المرجع من رسالة التأكيد والبريد الإلكتروني الذي استخدمته في الحجز.",
                "reference": "رقم مرجع الحجز",
                "email": "البريد الإلكتروني",
                "submit": "ابحث عن الحجز",
                "not_found": "لا يوجد حجز مطابق لرقم المرجع والبريد الإلكتروني.",
                "cancellation_fee": "رسوم الإلغاء",
            },
        },
        "login": {
            "title": "دخول الموظفين",
            "subtitle": "سجّل الدخول لإدارة الحجوزات والقاعة.",
            "email": "البريد الإلكتروني",
            "password": "كلمة المرور",
            "submit": "تسجيل الدخول",
            "demo_hint": "تجريبي: admin@mavera.com / admin123",
        },
        "footer": {
            "privacy": "سياسة الخصوصية",
            "terms": "شروط الخدمة",
            "my_booking": "استعلام عن حجزي",
            "rights": "جميع الحقوق محفوظة.",
        },
        "legal": {
            "privacy": {
                "title": "سياسة الخصوصية",
                "body": "نستخدم بيانات التواصل الخاصة بك فقط لمعالجة حجزك واستفساراتك، ولا نبيعها أو "
                        "نشاركها مع أي طرف ثالث.",
            },
            "terms": {
                "title": "شروط الخدمة",
                "body": "يتم تأكيد الحجز عند استلام العربون. يترتب على الإلغاء المتأخر رسوم كما هو موضح "
                        "في صفحة تفاصيل القاعة.",
            },
        },
        "calendar": {
            "months": [
                "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
                "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
            ],
            "weekdays": ["الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"],
            "weekdays_short": ["أحد", "اثنين", "ثلاثاء", "أربعاء", "خميس", "جمعة", "سبت"],
            "prev_month": "الشهر السابق",
            "next_month": "الشهر التالي",
            "availability": {
                "available": "متاح",
                "booked": "محجوز",
                "unavailable": "غير متاح",
                "maintenance": "صيانة",
            },
        },
        "status": {
            "pending": "قيد الانتظار",
            "confirmed": "مؤكد",
            "cancelled": "ملغي",
            "completed": "مكتمل",
            "scheduled": "مجدول",
            "in-progress": "قيد التنفيذ",
            "open": "مفتوح",
            "in_progress": "قيد المعالجة",
            "resolved": "تم الحل",
            "closed": "مغلق",
            "active": "نشط",
            "inactive": "غير نشط",
            "published": "منشور",
            "draft": "مسودة",
        },
        "priority": {
            "high": "عالية",
            "medium": "متوسطة",
            "normal": "عادية",
            "low": "منخفضة",
        },
        "announcement_types": {
            "general": "عام",
            "maintenance": "صيانة",
            "service": "خدمة",
            "promotion": "عرض",
        },
        "errors": {
            "validation": {
                "required": "هذا الحقل مطلوب",
                "invalid_email": "يرجى إدخال بريد إلكتروني صحيح",
                "invalid_phone": "يرجى إدخال رقم هاتف صحيح",
                "password_too_weak": "يجب أن تتكون كلمة المرور من 8 أحرف على الأقل وتحتوي على حروف كبيرة "
                                     "وصغيرة ورقم ورمز",
                "password_mismatch": "كلمتا المرور غير متطابقتين",
                "too_short": "القيمة قصيرة جداً",
                "invalid_date": "يرجى إدخال تاريخ صحيح",
                "invalid_time": "يرجى إدخال وقت صحيح",
                "invalid_number": "يرجى إدخال رقم صحيح",
            },
            "booking": {
                "invalid": "يرجى تصحيح الحقول المحددة.",
                "guest_count": "عدد الضيوف خارج الحدود المسموح بها للقاعة",
                "past_date": "تاريخ المناسبة في الماضي",
                "advance_required": "يجب الحجز قبل موعد المناسبة بمدة أطول",
                "advance_too_far": "لا يمكن الحجز قبل المناسبة بهذه المدة",
                "end_before_start": "يجب أن يكون وقت النهاية بعد وقت البداية",
                "too_long": "مدة الحجز أطول من الحد الأقصى المسموح",
                "conflict": "الوقت المطلوب يتداخل مع حجز قائم: {title}",
                "date_unavailable": "القاعة غير متاحة في هذا التاريخ",
                "invalid_transition": "لا يمكن تغيير الحالة بهذا الشكل",
            },
            "page": {
                "not_found_title": "الصفحة غير موجودة",
                "not_found": "الصفحة التي تبحث عنها غير موجودة.",
                "forbidden_title": "غير مصرح",
                "forbidden": "يرجى تسجيل الدخول للمتابعة.",
                "server_title": "حدث خطأ ما",
                "server": "حدث خطأ غير متوقع. يرجى المحاولة لاحقاً.",
                "generic_title": "تعذر تنفيذ الطلب",
                "back_home": "العودة للرئيسية",
            },
        },
        "flash": {
            "saved": "تم الحفظ.",
            "deleted": "تم الحذف.",
            "missing_fields": "الرجاء تعبئة جميع الحقول المطلوبة.",
            "invalid_status": "حالة غير معروفة.",
            "invalid_range": "يرجى اختيار تاريخ أو فترة صحيحة.",
            "invalid_settings": "يرجى مراجعة الإعدادات المحددة.",
            "duplicate_email": "هذا البريد الإلكتروني مسجل مسبقاً.",
            "reply_sent": "تم إرسال الرد.",
            "booking_created": "تم إنشاء الحجز {reference}.",
            "booking_status": "أصبحت حالة الحجز {reference}: {status}.",
            "booking_cancelled": "تم إلغاء الحجز {reference}.",
            "booking_cancelled_fee": "تم إلغاء الحجز {reference} مع رسوم إلغاء متأخر {fee}.",
            "booking_deleted": "تم حذف الحجز {reference}.",
            "task_status": "أصبحت حالة المهمة \"{title}\": {status}.",
            "days_blocked": "تم حجب {count} يوم.",
            "days_skipped_booked": "تم تخطي {count} يوم لوجود حجوزات فيها.",
            "days_unblocked": "تمت إعادة فتح {count} يوم.",
        },
        "staff": {
            "console": "لوحة الموظفين",
            "empty": "لا يوجد شيء هنا بعد.",
            "save": "حفظ",
            "cancel": "إلغاء",
            "edit": "تعديل",
            "delete": "حذف",
            "update": "تحديث",
            "filter": "تصفية",
            "publish": "نشر",
            "unpublish": "إلغاء النشر",
            "actions": "الإجراءات",
            "all_statuses": "الكل",
            "confirm_delete": "هل أنت متأكد من الحذف؟",
            "nav": {
                "dashboard": "لوحة التحكم",
                "bookings": "الحجوزات",
                "booking_calendar": "تقويم الحجوزات",
                "calendar": "التقويم",
                "availability": "التوفر",
                "tasks": "المهام",
                "customers": "العملاء",
                "support": "الدعم",
                "notifications": "الإشعارات",
                "announcements": "الإعلانات",
                "faqs": "الأسئلة الشائعة",
                "gallery": "المعرض",
                "pages": "الصفحات",
                "reports": "التقارير",
                "analytics": "التحليلات",
                "users": "الموظفون",
                "logs": "سجل النشاط",
                "hall": "معلومات القاعة",
                "settings": "قواعد الحجز",
                "profile": "الملف الشخصي",
            },
            "fields": {
                "reference": "المرجع",
                "title": "العنوان",
                "name": "الاسم",
                "email": "البريد الإلكتروني",
                "customer": "العميل",
                "event_type": "نوع المناسبة",
                "date": "التاريخ",
                "guests": "الضيوف",
                "amount": "المبلغ",
                "status": "الحالة",
                "type": "النوع",
                "priority": "الأولوية",
                "category": "الفئة",
                "description": "الوصف",
                "content": "المحتوى",
                "due": "الاستحقاق",
                "assigned_to": "مسند إلى",
                "notes": "ملاحظات",
                "reason": "السبب",
                "from": "من",
                "to": "إلى",
                "publish_date": "تاريخ النشر",
                "source": "المصدر",
                "cancellation_fee": "رسوم الإلغاء",
            },
            "dashboard": {
                "title": "لوحة التحكم",
                "todays_events": "مناسبات اليوم",
                "active_bookings": "الحجوزات النشطة",
                "pending_bookings": "بانتظار التأكيد",
                "week_bookings": "الأيام السبعة القادمة",
                "pending_tasks": "المهام المفتوحة",
                "overdue_tasks": "المهام المتأخرة",
                "open_tickets": "التذاكر المفتوحة",
                "unread_notifications": "إشعارات غير مقروءة",
                "upcoming": "الحجوزات القادمة",
                "recent_activity": "النشاط الأخير",
            },
            "bookings": {
                "new": "حجز جديد",
                "search": "الاسم أو البريد أو المرجع",
                "cancel_booking": "إلغاء الحجز",
                "confirm_cancel": "هل تريد إلغاء هذا الحجز؟ قد تُطبق رسوم إلغاء متأخر.",
            },
            "calendar": {
                "new_event": "حدث جديد",
                "events": "أحداث هذا الشهر",
                "types": {
                    "maintenance": "صيانة",
                    "meeting": "اجتماع",
                    "other": "أخرى",
                },
            },
            "availability": {
                "block": "حجب",
                "unblock": "إعادة فتح",
                "block_range": "حجب فترة",
                "unblock_range": "إعادة فتح فترة",
                "booked_note": "لا يمكن حجب الأيام التي تحتوي على حجوزات.",
            },
            "tasks": {
                "new": "مهمة جديدة",
                "overdue": "متأخرة",
                "categories": {
                    "booking": "الحجوزات",
                    "operations": "العمليات",
                    "support": "الدعم",
                    "content": "المحتوى",
                },
            },
            "customers": {
                "new": "عميل جديد",
                "search": "الاسم أو البريد أو الهاتف",
                "total_bookings": "الحجوزات",
                "total_spent": "إجمالي الإنفاق",
                "last_booking": "آخر حجز",
                "preferences": "التفضيلات (مفصولة بفواصل)",
                "history": "سجل الحجوزات",
            },
            "announcements": {"new": "إعلان جديد"},
            "faqs": {
                "new": "سؤال جديد",
                "question": "السؤال",
                "answer": "الإجابة",
                "views": "المشاهدات",
            },
            "gallery": {
                "new": "إضافة صورة",
                "url": "رابط الصورة",
                "featured": "مميزة",
                "toggle_feature": "تبديل التمييز",
            },
            "pages": {
                "slug": "المسار",
                "create": "إنشاء",
                "default_content": "المحتوى الافتراضي",
                "meta_description": "الوصف التعريفي",
            },
            "support": {
                "subject": "الموضوع",
                "replies": "الردود",
                "reply": "رد",
                "send": "إرسال الرد",
                "assign": "إسناد",
            },
            "notifications": {
                "mark_read": "تعليم كمقروء",
                "mark_all": "تعليم الكل كمقروء",
            },
            "users": {
                "new": "موظف جديد",
                "role": "الدور",
                "department": "القسم",
                "last_login": "آخر دخول",
                "activate": "تفعيل",
                "deactivate": "إيقاف",
            },
            "logs": {
                "time": "الوقت",
                "user": "المستخدم",
                "action": "الإجراء",
                "severity": {
                    "info": "معلومات",
                    "warning": "تحذير",
                    "error": "خطأ",
                },
            },
            "reports": {
                "export": "تصدير CSV",
                "total": "الحجوزات",
                "revenue": "الإيرادات",
                "average": "متوسط الحجز",
                "guests": "الضيوف",
                "cancellation_fees": "رسوم الإلغاء",
                "by_status": "حسب الحالة",
                "by_event_type": "حسب نوع المناسبة",
            },
            "analytics": {
                "month": "الشهر",
                "growth": "نمو الإيرادات",
                "months": "{count} أشهر",
            },
            "hall": {"amenities_help": "المرافق (واحد في كل سطر)"},
            "settings": {
                "help": "تنطبق هذه القواعد على طلبات الحجز الجديدة.",
                "min_guests": "الحد الأدنى للضيوف",
                "max_guests": "الحد الأقصى للضيوف",
                "min_notice_days": "أقل مدة إشعار (أيام)",
                "max_advance_days": "أقصى مدة مسبقة (أيام)",
                "cancellation_deadline_days": "مهلة الإلغاء (أيام)",
                "deposit_percentage": "العربون (كسر عشري، مثال 0.30)",
                "late_cancellation_fee_percentage": "رسوم الإلغاء المتأخر (كسر عشري، مثال 0.10)",
            },
            "profile": {
                "language": "لغة الواجهة",
                "demo_account": "مدير تجريبي",
            },
        },
    },
}
