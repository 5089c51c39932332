"""
Bundled Siksha Mantra chatbot corpus.
Used when no CORPUS_PATH is configured.
"""

CHATBOT_DATA = {
    "intents": [
        {
            "tag": "greeting",
            "patterns": [
                "hello there",
                "hey there",
                "good morning",
                "good evening",
                "hello siksha mantra"
            ],
            "responses": [
                "Hello! I'm your Siksha Mantra assistant. How can I help you today?",
                "Hi there! Ask me anything about courses, meetings or payments on Siksha Mantra.",
                "Namaste! How can I help you with Siksha Mantra today?"
            ]
        },
        {
            "tag": "about",
            "patterns": [
                "what is siksha mantra",
                "tell me about siksha mantra",
                "what does siksha mantra do"
            ],
            "responses": [
                "Siksha Mantra is a tutoring marketplace that connects students with teachers for courses and live meetings.",
                "Siksha Mantra helps students find teachers, join live meetings and buy courses, all in one place."
            ]
        },
        {
            "tag": "register_student",
            "patterns": [
                "how do i register as a student",
                "student registration",
                "sign up as student",
                "create student account"
            ],
            "responses": [
                "Click 'Sign Up', choose the Student role, fill in your details and verify your email to get started."
            ]
        },
        {
            "tag": "register_teacher",
            "patterns": [
                "how do i register as a teacher",
                "teacher registration",
                "sign up as teacher",
                "become a teacher"
            ],
            "responses": [
                "Click 'Sign Up', choose the Teacher role and complete your profile. An admin reviews new teacher profiles before they go live."
            ]
        },
        {
            "tag": "upload_course",
            "patterns": [
                "how to upload courses",
                "upload a course",
                "add new course",
                "publish my course"
            ],
            "responses": [
                "Teachers can upload courses from the dashboard: open 'My Courses', click 'Upload Course', add the title, description, price and files, then submit for review."
            ]
        },
        {
            "tag": "meetings",
            "patterns": [
                "how do meetings work",
                "schedule a meeting",
                "join a meeting",
                "book a meeting with teacher"
            ],
            "responses": [
                "Students request a meeting from a teacher's profile. Once the teacher accepts an offer, the meeting appears in your dashboard with a join link at the scheduled time.",
                "Meetings are scheduled between a student and a teacher after an offer is accepted. You'll get a reminder before it starts and can join from your dashboard."
            ]
        },
        {
            "tag": "post_request",
            "patterns": [
                "how to post a request",
                "post a tutoring request",
                "create a post for teachers"
            ],
            "responses": [
                "Go to 'Posts', click 'Create Post', describe the subject and schedule you need help with, and teachers will send you offers."
            ]
        },
        {
            "tag": "payment",
            "patterns": [
                "how do i pay",
                "payment methods",
                "pay with esewa",
                "how does payment work"
            ],
            "responses": [
                "Payments are made securely through eSewa. After you confirm a course or meeting, you'll be redirected to eSewa to complete the payment."
            ]
        },
        {
            "tag": "teacher_balance",
            "patterns": [
                "check my balance",
                "teacher earnings",
                "when do i get paid",
                "request a payout"
            ],
            "responses": [
                "Teachers can see their earnings under 'Balance' in the dashboard. Payouts are processed by the admin team after you request a withdrawal."
            ]
        },
        {
            "tag": "thanks",
            "patterns": [
                "thank you",
                "thanks a lot",
                "that was helpful"
            ],
            "responses": [
                "You're welcome! Happy learning with Siksha Mantra.",
                "Glad I could help! Let me know if you have any other questions."
            ]
        },
        {
            "tag": "goodbye",
            "patterns": [
                "goodbye",
                "see you later",
                "bye for now"
            ],
            "responses": [
                "Goodbye! Have a great day of learning.",
                "See you soon! Come back any time you need help."
            ]
        }
    ],
    "faq": [
        {
            "question": "is siksha mantra free to use",
            "answer": "Creating an account is free. You only pay for the courses and meetings you book."
        },
        {
            "question": "can i get a refund for a course",
            "answer": "Refund requests are reviewed case by case. Please contact support@sikshamantra.com with your payment details."
        },
        {
            "question": "how do i reset my password",
            "answer": "Click 'Forgot Password' on the login page and follow the link sent to your registered email."
        },
        {
            "question": "how do i contact support",
            "answer": "You can reach the Siksha Mantra support team at support@sikshamantra.com."
        },
        {
            "question": "how can i leave a review for a teacher",
            "answer": "After a meeting ends, open it from your dashboard and choose 'Leave a Review' to rate the teacher."
        },
        {
            "question": "where can i see my meeting summary",
            "answer": "Meeting summaries are available from the meeting details page once the teacher has submitted them."
        }
    ]
}
