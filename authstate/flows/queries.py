"""GraphQL documents sent by the auth flows."""

USER_FIELDS = """
{
  id,
  email,
  strategies {
    local {
      isVerified
    }
  }
}"""

USER_WITH_AUTH_TOKEN = f"""
{{
  user {USER_FIELDS},
  authToken
}}"""

LOGIN_QUERY = f"""
query($email: email!, $password: password!){{
   payload: login(email: $email, password: $password)
   {USER_WITH_AUTH_TOKEN}
}}"""

LOGIN_TOKEN_QUERY = f"""
query {{
   payload: loginAuthToken
   {USER_FIELDS}
}}"""

CREATE_USER_MUTATION = f"""
mutation($email: email!, $password: password!){{
   payload: createUser(email: $email, password: $password)
   {USER_WITH_AUTH_TOKEN}
}}"""

EMAIL_PASSWORD_RESET_MUTATION = """
mutation($email: email!){
   payload: emailPasswordReset(email: $email)
}"""

RESET_PASSWORD_MUTATION = f"""
mutation($password: password!){{
   payload: resetPassword(password: $password)
   {USER_WITH_AUTH_TOKEN}
}}"""
